"""Devices table: Spotify Connect devices, activation transfers playback."""

from typing import Any, Dict, List

from loguru import logger

from spotify_cli.core.output import log
from spotify_cli.domain.library.provider import PlayerControls
from spotify_cli.domain.navigation.ports import FIRST_DATA_ROW, HEADER_ROW, Row

from .table import Table

DEVICES_HEADER: Row = ("Name", "Type")


def device_rows(devices: List[Dict[str, Any]]) -> list[Row]:
    return [DEVICES_HEADER] + [
        (device.get("name", "Unknown"), device.get("type", "")) for device in devices
    ]


def bind_devices(table: Table, client: PlayerControls) -> List[Dict[str, Any]]:
    """Fill the table with the client's devices and wire activation.

    The active device starts out selected. Activating the header is ignored.

    Returns:
        The devices shown, in row order
    """
    devices = client.devices()
    table.set_rows(device_rows(devices))

    for i, device in enumerate(devices):
        if device.get("is_active"):
            table.select(i + FIRST_DATA_ROW)

    def transfer(row: int) -> None:
        if row == HEADER_ROW or row - FIRST_DATA_ROW >= len(devices):
            return
        device = devices[row - FIRST_DATA_ROW]
        if client.transfer_playback(device["id"], True):
            log(f"Playback moved to {device.get('name', device['id'])}", level="info")
        else:
            logger.warning(f"Transfer to device {device['id']} failed")

    table.on_item_activated(transfer)
    return devices
