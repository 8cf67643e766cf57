from datetime import datetime

import pytest

from rasathane.parser import parse


def make_row(date="2024.01.15", time="12:34:56", lat="40.8123", lon="29.1234",
             depth="7.0", md="-.-", ml="2.1", mw="-.-",
             location="MARMARA DENIZI", quality="İlksel"):
    """Lay out one listing row at the observatory's fixed column offsets."""
    return (
        f"{date:<10} {time:<8}  {lat:<7}   {lon:<7}  {depth:>10}    "
        f"{md:<4} {ml:<4} {mw:<4}   {location:<47} {quality}"
    )


RULE = "---------- --------  --------  -------   ----------    ------------    --------------"

HEADER_LINES = [
    ".....KANDILLI RASATHANESI VE DEPREM ARASTIRMA ENSTITUSU (KRDAE).....",
    "........BOLGESEL DEPREM-TSUNAMI IZLEME VE DEGERLENDIRME MERKEZI........",
    "....... SON 500 DEPREM .......",
]

COLUMN_TITLES = "Tarih      Saat      Enlem(N)  Boylam(E) Derinlik(km)  MD   ML   Mw    Yer                                             Çözüm Niteliği"


@pytest.fixture
def row():
    return make_row


@pytest.fixture
def sample_text():
    lines = HEADER_LINES + [
        "",
        COLUMN_TITLES,
        RULE,
        make_row("2024.01.15", "12:34:56", location="MARMARA DENIZI", ml="2.1"),
        make_row("2024.01.15", "11:02:10", "38.4011", "27.0412", "12.3", "-.-", "3.4", "3.5",
                 "KARSIYAKA (IZMIR)", "İlksel"),
        make_row("2024.01.15", "09:45:00", "40.1500", "26.4100", "5.0", "-.-", "1.8", "-.-",
                 "ÇANAKKALE-ŞİLE", "REVIZE01 (2024.01.15)"),
        make_row("2024.01.14", "23:59:59", "39.9000", "32.8500", "8.8", "-.-", "4.1", "4.0",
                 "GÖLBAŞI (ANKARA)", "İlksel"),
        "",
        "*: Revize edilmis cozum",
    ]
    return "\n".join(lines) + "\n"


@pytest.fixture
def sample_result(sample_text):
    return parse(sample_text)


@pytest.fixture
def now():
    return datetime(2024, 1, 15, 13, 0, 0)
