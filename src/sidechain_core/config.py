"""
Sidechain parameters.

Constants fixed by the host chain's sidechain convention, and a typed
options model for callers that run against a specific sidechain.
"""

from __future__ import annotations
from typing import Any, Dict

from pydantic import BaseModel, Field

# Script opcode marking an unspendable data-carrier output
OP_RETURN = 0x6A

SCRIPT_MAGIC = bytes([0xAC, 0xDC, 0xF6, 0x6F])
SCRIPT_HEADER_SIZE = 1 + len(SCRIPT_MAGIC)

MAX_SIDECHAIN = 255
CHECKSUM_LENGTH = 6


class SidechainParams(BaseModel):
    """
    Options for the sidechain this node serves.

    ``this_sidechain`` is the default sidechain number for generated
    deposit addresses.
    """
    this_sidechain: int = Field(default=0, ge=0, le=MAX_SIDECHAIN, alias="thisSidechain",
                                description="Sidechain number of this node")
    script_magic: bytes = Field(default=SCRIPT_MAGIC, min_length=4, max_length=4, alias="scriptMagic",
                                description="Magic following OP_RETURN in object scripts")
    checksum_length: int = Field(default=CHECKSUM_LENGTH, ge=1, le=64, alias="checksumLength",
                                 description="Hex characters of SHA-256 kept as address checksum")

    model_config = {"populate_by_name": True}

    @property
    def script_header(self) -> bytes:
        """OP_RETURN followed by the magic."""
        return bytes([OP_RETURN]) + self.script_magic

    def deposit_address(self, destination: str) -> str:
        """Generate a deposit address for ``this_sidechain``."""
        # Import here to avoid circular imports
        from .address import generate_deposit_address
        return generate_deposit_address(self.this_sidechain, destination, params=self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "thisSidechain": self.this_sidechain,
            "scriptMagic": self.script_magic.hex(),
            "checksumLength": self.checksum_length,
        }


DEFAULT_PARAMS = SidechainParams()
