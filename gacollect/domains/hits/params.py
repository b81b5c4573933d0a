"""Per-hit-type parameter builders.

Each function maps semantic arguments to the protocol's short field
codes. Mandatory fields are always present; optional fields are added
only when their value is truthy, so ``None``, ``""`` and ``0`` never
reach the wire.
"""

from typing import Any, Dict, Optional

from gacollect.domains.hits.types import EventOptions, RefundOptions, TransactionOptions

Params = Dict[str, Any]


def _put_if(params: Params, key: str, value: Any) -> None:
    if value:
        params[key] = value


def pageview_params(hostname: str, url: str, title: str) -> Params:
    """Fields of a ``pageview`` hit."""
    return {"dh": hostname, "dp": url, "dt": title}


def event_params(category: str, action: str, options: Optional[EventOptions] = None) -> Params:
    """Fields of an ``event`` hit."""
    options = options or EventOptions()
    params: Params = {"ec": category, "ea": action}
    _put_if(params, "el", options.label)
    _put_if(params, "ev", options.value)
    return params


def screenview_params(
    app_name: str,
    app_version: str,
    app_id: str,
    app_installer_id: str,
    screen_name: str,
) -> Params:
    """Fields of a ``screenview`` hit."""
    return {
        "an": app_name,
        "av": app_version,
        "aid": app_id,
        "aiid": app_installer_id,
        "cd": screen_name,
    }


def transaction_params(transaction_id: str, options: Optional[TransactionOptions] = None) -> Params:
    """Fields of a ``transaction`` hit."""
    options = options or TransactionOptions()
    params: Params = {"ti": transaction_id}
    _put_if(params, "ta", options.affiliation)
    _put_if(params, "tr", options.revenue)
    _put_if(params, "ts", options.shipping)
    _put_if(params, "tt", options.tax)
    _put_if(params, "cu", options.currency)
    return params


def social_params(action: str, network: str, target: str) -> Params:
    """Fields of a ``social`` hit."""
    return {"sa": action, "sn": network, "st": target}


def exception_params(description: str, is_fatal: Any) -> Params:
    """Fields of an ``exception`` hit.

    ``exf`` is an integer flag on the wire; booleans are sent as 1/0.
    """
    if isinstance(is_fatal, bool):
        is_fatal = int(is_fatal)
    return {"exd": description, "exf": is_fatal}


def refund_params(transaction_id: str, options: Optional[RefundOptions] = None) -> Params:
    """Fields of a refund, sent as an ``event`` hit.

    Category, action and non-interaction come from ``options``; the
    product action is always ``refund``.
    """
    options = options or RefundOptions()
    return {
        "ec": options.category,
        "ea": options.action,
        "ni": options.non_interaction,
        "ti": transaction_id,
        "pa": "refund",
    }
