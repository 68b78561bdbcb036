import pytest

from statement_ledger.domain.descriptions import clean_description


@pytest.mark.parametrize("raw", ["", None])
def test_empty_input(raw: str | None) -> None:
    assert clean_description(raw) == ""


def test_strips_card_reference() -> None:
    assert clean_description("Esselunga N.carta: ****1234") == "Esselunga"
    assert clean_description("Lidl carta 5678") == "Lidl"


def test_strips_embedded_date_and_time() -> None:
    assert clean_description("Conad data 05/03/24 ora 12:30") == "Conad"
    assert clean_description("Conad Data: 05/03/2024 18.45") == "Conad"


def test_strips_payment_boilerplate() -> None:
    assert clean_description("PAGAMENTO POS CARREFOUR") == "CARREFOUR"
    assert clean_description("Apple Pay Uber Trip") == "Uber Trip"
    assert clean_description("Google  Pay Bar Roma") == "Bar Roma"
    assert clean_description("ADDEBITO CARTA Auchan") == "Auchan"
    assert clean_description("BONIFICO SALARY") == "SALARY"
    assert clean_description("Prelievo Bancomat") == "Bancomat"


def test_strips_reference_codes() -> None:
    assert clean_description("Amazon AB12CD34EF") == "Amazon"
    assert clean_description("Affitto rif. 4455 Marzo") == "Affitto Marzo"
    assert clean_description("Netflix ID 44556") == "Netflix"


def test_keeps_plain_uppercase_words() -> None:
    assert clean_description("MERCATO CENTRALE") == "MERCATO CENTRALE"


def test_keeps_words_containing_id() -> None:
    assert clean_description("Lidl Milano") == "Lidl Milano"


def test_normalizes_punctuation() -> None:
    assert clean_description("Taxi , Roma") == "Taxi, Roma"
    assert clean_description("Bar - Centro") == "Bar Centro"
    assert clean_description("Cafe:Duomo") == "Cafe Duomo"


def test_removals_leave_single_spaces() -> None:
    raw = "PAGAMENTO POS  Conad   data 01/02/24  ora 09:15  N.carta ****4321"
    assert clean_description(raw) == "Conad"
