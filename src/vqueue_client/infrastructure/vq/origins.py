from __future__ import annotations

from vqueue_client.domain.value_objects.enums import Resort

VQ_ORIGINS: dict[Resort, str] = {
    Resort.WDW: "https://vqguest-svc-wdw.wdprapps.disney.com",
    Resort.DL: "https://vqguest-svc.wdprapps.disney.com",
}

_ORIGIN_TO_RESORT = {origin: resort for resort, origin in VQ_ORIGINS.items()}

API_PATH = "/application/v1/guest"


def is_virtual_queue_origin(origin: str) -> bool:
    return origin in _ORIGIN_TO_RESORT


def resort_for_origin(origin: str) -> Resort | None:
    return _ORIGIN_TO_RESORT.get(origin)
