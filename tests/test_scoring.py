import pytest

from linkmanager.domain.models import FileNode
from linkmanager.domain.scoring import (
    DEFAULT_MATCH_CONFIG,
    MatchConfig,
    date_digit_terms,
    score_candidate,
    trailing_suffix,
)


def _node(name: str) -> FileNode:
    return FileNode(path=f"Root/Ponto 1/{name}", name=name)


def test_score_candidate_without_overlap_is_none() -> None:
    assert score_candidate("Mapas", [], _node("Contrato.pdf")) is None


def test_score_candidate_only_stop_words_is_none() -> None:
    assert score_candidate("de a o", [], _node("de.pdf")) is None


def test_score_candidate_uses_larger_overlap_ratio() -> None:
    score = score_candidate("Relatório Anual Contas Gerais", [], _node("Contas.pdf"))
    assert score == pytest.approx(0.5)


def test_score_candidate_date_boost() -> None:
    score = score_candidate(
        "Relatório Final", ["20/04/2010"], _node("RE_Relatorio_Final_20042010.pdf")
    )
    assert score == pytest.approx(1.4)


def test_score_candidate_year_first_date_in_name() -> None:
    with_date = score_candidate("Ata", ["20/04/2010"], _node("Ata_2010_04_20.pdf"))
    without_date = score_candidate("Ata", [], _node("Ata_2010_04_20.pdf"))
    assert with_date == pytest.approx(without_date + DEFAULT_MATCH_CONFIG.date_boost)


def test_score_candidate_extension_boost() -> None:
    score = score_candidate("Ata.docx", [], _node("Ata_reuniao.docx"))
    assert score == pytest.approx(1.2)


def test_score_candidate_short_extension_gets_no_boost() -> None:
    score = score_candidate("Foto.ab", [], _node("Foto_obra.ab"))
    # ratio 1.0 only; "ab" is too short for the extension boost
    assert score == pytest.approx(1.0)


def test_score_candidate_sequence_boost() -> None:
    score = score_candidate("Mapas", [], _node("Mapas_v1.pdf"))
    assert score == pytest.approx(1.15)


def test_score_candidate_respects_config() -> None:
    config = MatchConfig(sequence_boost=0.0)
    assert score_candidate("Mapas", [], _node("Mapas_v1.pdf"), config) == pytest.approx(1.0)


def test_date_digit_terms_dedupes_and_filters_short() -> None:
    terms = date_digit_terms(["20/04/2010", "20/04"], DEFAULT_MATCH_CONFIG)
    assert terms == ["20042010", "20100420"]


def test_trailing_suffix() -> None:
    assert trailing_suffix("a.b.PDF") == "pdf"
    assert trailing_suffix("Mapas") == "mapas"
