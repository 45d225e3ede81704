"""Bonded blocks and rotation validators."""

from __future__ import annotations

import logging
from typing import Iterable, Protocol

from .axes import RotationAxis
from .blocks import Block

logger = logging.getLogger(__name__)


class RotationValidator(Protocol):
    def can_rotate_around(self, axis: RotationAxis, theta: float, blocks: list[Block]) -> bool:
        ...


class Bandage:
    """Principal block and the extension blocks rigidly bonded to it."""

    def __init__(self, principal: Block, extensions: Iterable[Block] = ()):
        self.principal = principal
        self.extensions: list[Block] = list(extensions)

    @property
    def blocks(self) -> list[Block]:
        return [self.principal, *self.extensions]

    @property
    def block_ids(self) -> set[str]:
        return {b.id for b in self.blocks}

    def is_principal(self, block_id: str) -> bool:
        return self.principal.id == block_id

    def __repr__(self) -> str:
        return f"Bandage({self.principal.id!r}, {[b.id for b in self.extensions]!r})"


class BandagesCollection:
    """Index of bandages by member block id; also acts as a rotation validator."""

    def __init__(self, blocks: Iterable[Block]):
        self._blocks = {b.id: b for b in blocks}
        self._index: dict[str, Bandage] = {}
        self._bandages: list[Bandage] = []

    @property
    def bandages(self) -> list[Bandage]:
        return list(self._bandages)

    def band(self, principal_id: str, extension_id: str) -> Bandage:
        if principal_id == extension_id:
            raise ValueError(f"Block '{principal_id}' cannot be banded to itself")
        for block_id in (principal_id, extension_id):
            if block_id not in self._blocks:
                raise ValueError(f"Unknown block '{block_id}'")
        if extension_id in self._index:
            raise ValueError(f"Block '{extension_id}' is already part of a bandage")

        bandage = self._index.get(principal_id)
        if bandage is not None and not bandage.is_principal(principal_id):
            raise ValueError(f"Block '{principal_id}' is an extension of '{bandage.principal.id}'")
        if bandage is None:
            bandage = Bandage(self._blocks[principal_id])
            self._bandages.append(bandage)
            self._index[principal_id] = bandage

        bandage.extensions.append(self._blocks[extension_id])
        self._index[extension_id] = bandage
        logger.debug("Banded %s to %s", extension_id, principal_id)
        return bandage

    def get_bandage(self, block_id: str) -> Bandage | None:
        return self._index.get(block_id)

    def can_rotate_around(self, axis: RotationAxis, theta: float, blocks: list[Block]) -> bool:
        """A bandage must be selected entirely or not at all."""
        selected = {b.id for b in blocks}
        expected = set(selected)
        for block_id in selected:
            bandage = self._index.get(block_id)
            if bandage is not None:
                expected |= bandage.block_ids
        return expected == selected
