import logging

import pytest

from src.masks import MaskKind, apply_mask, format_cnpj, format_cpf, match_regex


def test_cpf_formats_eleven_digits():
    assert apply_mask("cpf", "12345678901") == "123.456.789-01"


def test_cpf_with_wrong_length_returns_original():
    assert apply_mask("cpf", "123") == "123"
    assert apply_mask("cpf", "123.456.789-0") == "123.456.789-0"


def test_cnpj_formats_fourteen_digits():
    assert apply_mask("cnpj", "12345678000199") == "12.345.678/0001-99"


def test_cnpj_with_wrong_length_returns_original():
    assert apply_mask("cnpj", "12345678901") == "12345678901"


@pytest.mark.parametrize(
    "tipo, campo",
    [
        ("cpf", "12345678901"),
        ("cnpj", "12345678000199"),
    ],
)
def test_document_masks_are_idempotent(tipo, campo):
    once = apply_mask(tipo, campo)
    assert apply_mask(tipo, once) == once


def test_document_masks_ignore_existing_punctuation():
    assert apply_mask("cnpj", "12.345.678/0001-99") == "12.345.678/0001-99"
    assert apply_mask("cpf", "123 456 789 01") == "123.456.789-01"


def test_auto_dispatches_by_digit_count():
    assert apply_mask("auto", "12345678901") == apply_mask("cpf", "12345678901")
    assert apply_mask("auto", "12345678000199") == apply_mask("cnpj", "12345678000199")
    assert apply_mask("auto", "123.456.789-01") == "123.456.789-01"


def test_auto_with_other_digit_count_returns_original():
    assert apply_mask("auto", "12345") == "12345"
    assert apply_mask("auto", "1234567890123", "9.999") == "1234567890123"


def test_numero_applies_template():
    assert apply_mask("numero", "1234567", "9.999.999") == "1.234.567"
    assert apply_mask("numero", "12032024", "99/99/9999") == "12/03/2024"
    assert apply_mask("numero", "1.234.567", "9.999.999") == "1.234.567"


def test_numero_truncates_without_trailing_literals():
    assert apply_mask("numero", "123", "9.999.999") == "1.23"
    assert apply_mask("numero", "12", "99-99") == "12"


def test_numero_drops_excess_digits():
    assert apply_mask("numero", "12345", "99") == "12"


@pytest.mark.parametrize("formato", [None, "", "99-AA", "R$ 9.999", "9 999"])
def test_numero_without_valid_template_returns_original(formato):
    assert apply_mask("numero", "1234567", formato) == "1234567"


def test_monetario_with_real_symbol():
    assert apply_mask("monetario", "123456", "R$ 9.999,99") == "R$ 1.234,56"


def test_monetario_pads_short_values():
    assert apply_mask("monetario", "5", "R$ 9.999,99") == "R$ 0,05"
    assert apply_mask("monetario", "100", "R$ 9.999,99") == "R$ 1,00"
    assert apply_mask("monetario", "", "R$ 9.999,99") == "R$ 0,00"


def test_monetario_with_dollar_symbol_has_no_space():
    assert apply_mask("monetario", "123456", "$9.999,99") == "$1.234,56"


def test_monetario_dollar_prefix_drops_template_spacing():
    assert apply_mask("monetario", "123456", "$ 9.999,99") == "$1.234,56"


def test_monetario_prefix_depends_on_marker_presence_only():
    assert apply_mask("monetario", "123456", "9.999,99 R$") == "R$ 1.234,56"
    assert apply_mask("monetario", "123", "R 9,99") == "R 1,23"


@pytest.mark.parametrize("formato", [None, "", "9.999,99"])
def test_monetario_without_currency_marker_returns_original(formato):
    assert apply_mask("monetario", "123456", formato) == "123456"


def test_regex_match_returns_value():
    assert apply_mask("regex", "2023-ABC", r"^\d{4}-[A-Z]{3}$") == "2023-ABC"


def test_regex_non_match_returns_empty_string():
    assert apply_mask("regex", "2023-AB", r"^\d{4}-[A-Z]{3}$") == ""


def test_regex_uses_raw_value_not_digits():
    assert apply_mask("regex", "12-34", r"-") == "12-34"


def test_regex_malformed_pattern_returns_value():
    assert apply_mask("regex", "anything", "[unclosed") == "anything"


def test_regex_without_pattern_matches_everything():
    assert apply_mask("regex", "abc") == "abc"
    assert apply_mask("regex", "abc", "") == "abc"


def test_regex_end_anchor_rejects_trailing_newline():
    assert apply_mask("regex", "2023-ABC\n", r"^\d{4}-[A-Z]{3}$") == ""
    assert apply_mask("regex", "abc\n", "c$") == ""
    assert apply_mask("regex", "abc", "c$") == "abc"


def test_regex_escaped_and_bracketed_dollar_stay_literal():
    assert apply_mask("regex", "US$", r"\$$") == "US$"
    assert apply_mask("regex", "a$b", "[$]b") == "a$b"


def test_regex_character_classes_are_ascii_only():
    assert apply_mask("regex", "٢٠٢٣-ABC", r"^\d{4}-[A-Z]{3}$") == ""
    assert apply_mask("regex", "ação", r"^\w+$") == ""
    assert apply_mask("regex", "acao_1", r"^\w+$") == "acao_1"


def test_regex_over_length_limit_is_treated_as_malformed():
    assert match_regex("abc", "x+", max_length=1) == "abc"
    assert match_regex("abc", "x+", max_length=2) == ""
    assert apply_mask("regex", "abc", "zz", regex_max_length=1) == "abc"


@pytest.mark.parametrize("tipo", ["CPF", "telefone", "", "other", None])
def test_unknown_kind_returns_original(tipo):
    assert apply_mask(tipo, "12345678901", "9.999") == "12345678901"


@pytest.mark.parametrize(
    "tipo, campo, formato",
    [
        ("cpf", None, None),
        ("regex", "x", "(?P<"),
        ("regex", "x", "a{99999999999}"),
        ("numero", 1234567, "9.999.999"),
        ("monetario", "123", 42),
        (["cpf"], "123", None),
        ("monetario", "abc", "$"),
    ],
)
def test_apply_mask_never_raises(tipo, campo, formato):
    assert isinstance(apply_mask(tipo, campo, formato), str)


def test_format_helpers_reject_wrong_lengths():
    assert format_cpf("1234567890") is None
    assert format_cnpj("1234567800019") is None


def test_mask_kind_parse():
    assert MaskKind.parse("monetario") is MaskKind.MONETARIO
    assert MaskKind.parse("Monetario") is MaskKind.OTHER
    assert MaskKind.parse(None) is MaskKind.OTHER


def test_fallback_logs_do_not_expose_documents(caplog):
    caplog.set_level(logging.DEBUG, logger="src.masks.engine")

    assert apply_mask("cpf", "123.456.789-0") == "123.456.789-0"
    assert apply_mask("telefone", "11987654321") == "11987654321"

    assert caplog.records
    assert "1234567890" not in caplog.text
    assert "123.456.789-0" not in caplog.text
    assert "11987654321" not in caplog.text
