"""
Pytest fixtures shared by the alarm fax parser tests.
Provides sample faxes for every supported layout and a fixed reference time.
"""

from datetime import datetime

import pytest

from alarmfax.diagnostics import CollectingSink


@pytest.fixture
def now():
    """Fixed reference time for partial timestamps."""
    return datetime(2026, 10, 17, 9, 30, 45)


@pytest.fixture
def sink():
    """Diagnostics sink that keeps everything in memory."""
    return CollectingSink()


@pytest.fixture
def amberg_fax():
    """A complete ILS Amberg fax."""
    return [
        "ILS Amberg",
        "Einsatznummer: T 4.1 123456",
        "",
        "----- MITTEILER -----",
        "Name : Max Mustermann",
        "Rufnummer : 0961 12345",
        "----- EINSATZORT -----",
        "Straße : Hauptstraße",
        "Haus-Nr. : 12",
        "Ort : 92224 Amberg - Amberg Amberg",
        "Objekt : Sporthalle Nord",
        "Station : Wache 1",
        "----- KOORDINATEN -----",
        "X : 4500000",
        "Y : 5540279.6",
        "----- EINSATZGRUND -----",
        "Schlagw. : #B1014#Brand#Gebäude",
        "Stichwort : B 3",
        "----- BEMERKUNGEN -----",
        "Rauchentwicklung im Keller",
        "",
        "Personen evtl. noch im Gebäude",
        "----- EINSATZMITTEL -----",
        "Name : 7.8.1 FL AM 11/1",
        "Gerät : Atemschutz",
        "Gerät :",
        "Alarmiert : 12.03.2013 10:15",
        "Name : 7.8.1 FL AM 40/1",
        "Alarmiert : 12.03.2013 10:16",
        "Name : 7.8.1 FL AM 30/1",
        "----- ENDE ALARMFAX -----",
        "Name : FL AM 99/1",
        "Alarmiert : 12.03.2013 10:20",
    ]


@pytest.fixture
def ingolstadt_fax():
    """A complete ILS Ingolstadt fax with one malformed resource line."""
    return [
        "Absender : ILS Ingolstadt         Einsatznummer: 7.1 234567",
        "====== EINSATZORT ======",
        "Straße : Hauptstraße Haus-Nr.: 12 Hinterhaus",
        "Abschnitt : 1",
        "Ort : 85049 Ingolstadt - Ingolstadt Gemeinde: Ingolstadt",
        "Objekt : Klinikum",
        "Station : Wache Süd",
        "Kreuzung : Nebenstraße",
        "Plannummer : P-42",
        "====== ZIELORT ======",
        "Straße : Krankenhausweg 3",
        "Ort : Manching-Nord",
        "Objekt : Klinikum Nord",
        "Station : Wache Nord",
        "====== EREIGNIS ======",
        "Meldebild : Brand Wohnhaus",
        "Priorität : 1",
        "====== BEMERKUNG ======",
        "Zufahrt über Hof",
        "Hydrant vor dem Haus",
        "====== EINSATZMITTEL ======",
        "FL IN 11/1 >> Löschgruppenfahrzeug",
        "Rettungsdienst ohne Trenner",
        "FL IN 30/1 >> Drehleiter",
        "******************",
        "RD IN 1 >> ignoriert",
    ]


@pytest.fixture
def offenbach_fax():
    """A complete LFS Offenbach fax."""
    return [
        "ALARMAUSDRUCK LEITSTELLE OFFENBACH",
        "EINSATZNUMMER: 2013-001234",
        "ORT 63067 Offenbach am Main",
        "STRASSE Kaiserstraße 5",
        "OBJEKT Rathaus",
        "EINSATZPLANNUMMER 4711",
        "DIAGNOSE Brandmeldeanlage ausgelöst",
        "EINSATZSTICHWORT F BMA",
        "MELDENDE(R) Hausmeister",
        "BEMERKUNGEN Zufahrt über Hof",
        "Tor 2 benutzen",
        "BEMERKUNGEN Schlüssel im Depot",
        "DAS FAX WURDE AM 12.03.2013 UM 10:15:20 GESENDET",
        "AUSDRUCK VOM 12.03.2013",
    ]
