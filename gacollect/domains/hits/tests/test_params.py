"""Unit tests for the per-hit-type parameter builders."""

from dataclasses import dataclass
from typing import Any, Callable

import pytest

from gacollect.domains.hits import params
from gacollect.domains.hits.types import EventOptions, RefundOptions, TransactionOptions


@dataclass
class ParamsCase:
    id: str
    build: Callable[[], dict]
    expected: dict[str, Any]


CASES = [
    ParamsCase(
        id="pageview",
        build=lambda: params.pageview_params("example.com", "/home", "Home"),
        expected={"dh": "example.com", "dp": "/home", "dt": "Home"},
    ),
    ParamsCase(
        id="event_minimal",
        build=lambda: params.event_params("Video", "Play"),
        expected={"ec": "Video", "ea": "Play"},
    ),
    ParamsCase(
        id="event_full",
        build=lambda: params.event_params("Video", "Play", EventOptions(label="intro", value=42)),
        expected={"ec": "Video", "ea": "Play", "el": "intro", "ev": 42},
    ),
    ParamsCase(
        id="screenview",
        build=lambda: params.screenview_params(
            "Player", "1.2.0", "com.example.player", "com.android.vending", "Home"
        ),
        expected={
            "an": "Player",
            "av": "1.2.0",
            "aid": "com.example.player",
            "aiid": "com.android.vending",
            "cd": "Home",
        },
    ),
    ParamsCase(
        id="transaction_minimal",
        build=lambda: params.transaction_params("T123"),
        expected={"ti": "T123"},
    ),
    ParamsCase(
        id="transaction_full",
        build=lambda: params.transaction_params(
            "T123",
            TransactionOptions(
                affiliation="Store", revenue=25.5, shipping=3, tax=1.25, currency="EUR"
            ),
        ),
        expected={"ti": "T123", "ta": "Store", "tr": 25.5, "ts": 3, "tt": 1.25, "cu": "EUR"},
    ),
    ParamsCase(
        id="social",
        build=lambda: params.social_params("like", "facebook", "/post/1"),
        expected={"sa": "like", "sn": "facebook", "st": "/post/1"},
    ),
    ParamsCase(
        id="exception",
        build=lambda: params.exception_params("IOError", 1),
        expected={"exd": "IOError", "exf": 1},
    ),
    ParamsCase(
        id="refund_defaults",
        build=lambda: params.refund_params("T123"),
        expected={"ec": "Ecommerce", "ea": "Refund", "ni": 1, "ti": "T123", "pa": "refund"},
    ),
]


@pytest.mark.parametrize("case", CASES, ids=[c.id for c in CASES])
def test_builder_fields(case: ParamsCase):
    assert case.build() == case.expected


# ---------------------------------------------------------------------------
# Conditional inclusion of optional fields
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("label,value", [(None, None), ("", 0), (None, 0.0)])
def test_event_falsy_optionals_omitted(label, value):
    result = params.event_params("Video", "Play", EventOptions(label=label, value=value))
    assert result == {"ec": "Video", "ea": "Play"}


def test_event_only_label():
    result = params.event_params("Video", "Play", EventOptions(label="intro"))
    assert result == {"ec": "Video", "ea": "Play", "el": "intro"}
    assert "ev" not in result


def test_transaction_zero_values_omitted():
    result = params.transaction_params(
        "T1", TransactionOptions(revenue=10, shipping=0, tax=0, currency="")
    )
    assert result == {"ti": "T1", "tr": 10}


def test_transaction_only_currency():
    result = params.transaction_params("T1", TransactionOptions(currency="USD"))
    assert result == {"ti": "T1", "cu": "USD"}


# ---------------------------------------------------------------------------
# Exception flag
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("is_fatal,expected", [(True, 1), (False, 0), (1, 1), (0, 0)])
def test_exception_flag_always_sent(is_fatal, expected):
    result = params.exception_params("boom", is_fatal)
    assert result["exf"] == expected
    assert isinstance(result["exf"], int)
    assert not isinstance(result["exf"], bool)


# ---------------------------------------------------------------------------
# Refund
# ---------------------------------------------------------------------------


def test_refund_overrides_keep_product_action():
    result = params.refund_params(
        "T9", RefundOptions(category="Shop", action="Return", non_interaction=0)
    )
    assert result == {"ec": "Shop", "ea": "Return", "ni": 0, "ti": "T9", "pa": "refund"}
