"""
Sidechain object model.

Three record variants share a one-byte discriminator, ``sidechainop``:
withdrawal requests (WT), withdrawal bundles (WT^) and deposits. Each
variant serializes its discriminator first and then its fields in a fixed
order using the host chain's encodings, so the bytes are stable for
hashing and for embedding in scripts.

Status fields are plain scalars. Transitions are driven by chain
observation elsewhere; the model stores whatever value it is given and
renders values it does not know as ``"Unknown"``.
"""

from __future__ import annotations
from enum import IntEnum
from typing import ClassVar, Dict, Literal

from pydantic import BaseModel, Field

from ..codec.hashes import ZERO_HASH, hash_to_hex
from ..codec.reader import BinaryReader
from ..codec.writer import BinaryWriter
from ..money import INT64_MAX, INT64_MIN, format_money
from ..primitives.transaction import Transaction
from ..runtime.errors import DecodeError, EncodingError, UnmarshalError


class SidechainOp(IntEnum):
    """Discriminator values for serialized sidechain objects."""

    WT = 1
    WTPRIME = 2
    DEPOSIT = 3


class WTStatus(IntEnum):
    """Withdrawal request status: Unspent -> InBundle -> Spent."""

    UNSPENT = 0
    IN_WTPRIME = 1
    SPENT = 2


class WTPrimeStatus(IntEnum):
    """Withdrawal bundle status: Created -> Spent, or Created -> Failed."""

    CREATED = 0
    FAILED = 1
    SPENT = 2


WT_STATUS_NAMES: Dict[int, str] = {
    WTStatus.UNSPENT: "Unspent",
    WTStatus.IN_WTPRIME: "Pending - in WT^",
    WTStatus.SPENT: "Spent",
}

WTPRIME_STATUS_NAMES: Dict[int, str] = {
    WTPrimeStatus.CREATED: "Created",
    WTPrimeStatus.FAILED: "Failed",
    WTPrimeStatus.SPENT: "Spent",
}

UNKNOWN_STATUS = "Unknown"


def _sidechain_id():
    return Field(default=0, ge=0, le=255, description="Sidechain number")


def _amount(description: str):
    return Field(default=0, ge=INT64_MIN, le=INT64_MAX, description=description)


def _hash(description: str):
    return Field(default=ZERO_HASH, min_length=32, max_length=32, description=description)


class SidechainObj(BaseModel):
    """
    Polymorphic handle: only the discriminator.

    A bare handle is never produced by parsing; it exists so callers can
    carry an object whose tag is not one of the known variants.
    """

    sidechainop: int = Field(ge=0, le=255)

    model_config = {"validate_assignment": True}

    # Set by each variant
    OP: ClassVar[int] = -1

    def to_string(self) -> str:
        return f"sidechainop={int(self.sidechainop)}\n"

    # Variant codec hooks
    def _encode_fields(self, w: BinaryWriter) -> None:
        raise EncodingError(f"No codec for sidechain object type {self.sidechainop}")

    @classmethod
    def _decode_fields(cls, r: BinaryReader) -> Dict[str, object]:
        raise UnmarshalError(f"No codec for {cls.__name__}")

    def encode(self, w: BinaryWriter) -> None:
        """Write the discriminator followed by the variant's fields."""
        w.u8(int(self.sidechainop))
        self._encode_fields(w)

    @classmethod
    def decode(cls, r: BinaryReader):
        """
        Read one object of this variant from ``r``.

        Raises:
            UnmarshalError: If the tag does not match or a field is malformed
        """
        op = r.u8()
        if op != cls.OP:
            raise UnmarshalError(f"{cls.__name__} expects tag {cls.OP}, got {op}")
        try:
            return cls(**cls._decode_fields(r))
        except ValueError as e:
            # pydantic ValidationError is a ValueError subclass
            raise UnmarshalError(f"Invalid {cls.__name__} field value", cause=e)

    def serialize(self) -> bytes:
        """Exact byte serialization, discriminator first."""
        w = BinaryWriter()
        self.encode(w)
        return w.to_bytes()

    @classmethod
    def deserialize(cls, data: bytes):
        """
        Rebuild an object from ``serialize`` output.

        Raises:
            UnmarshalError: On truncated, malformed or over-long input
        """
        r = BinaryReader(data)
        try:
            obj = cls.decode(r)
        except DecodeError as e:
            raise UnmarshalError(f"Malformed {cls.__name__}", cause=e)
        if not r.eof:
            raise UnmarshalError(f"Trailing bytes after {cls.__name__}",
                                 details={"remaining": r.remaining})
        return obj


class SidechainWT(SidechainObj):
    """A single pending withdrawal off the sidechain."""

    OP: ClassVar[int] = SidechainOp.WT

    sidechainop: Literal[SidechainOp.WT] = SidechainOp.WT
    sidechain: int = _sidechain_id()
    destination: str = ""
    amount: int = _amount("Amount withdrawn")
    mainchain_fee: int = _amount("Fee offered to the mainchain")
    status: int = Field(default=WTStatus.UNSPENT, ge=0, le=255)
    hash_blind_wtx: bytes = _hash("Blinded withdrawal transaction hash")

    def _encode_fields(self, w: BinaryWriter) -> None:
        w.u8(self.sidechain)
        w.var_str(self.destination)
        w.i64le(self.amount)
        w.i64le(self.mainchain_fee)
        w.u8(self.status)
        w.hash256(self.hash_blind_wtx)

    @classmethod
    def _decode_fields(cls, r: BinaryReader) -> Dict[str, object]:
        return {
            "sidechain": r.u8(),
            "destination": r.var_str(),
            "amount": r.i64le(),
            "mainchain_fee": r.i64le(),
            "status": r.u8(),
            "hash_blind_wtx": r.hash256(),
        }

    def status_str(self) -> str:
        return WT_STATUS_NAMES.get(self.status, UNKNOWN_STATUS)

    def to_string(self) -> str:
        return (
            f"sidechainop={int(self.sidechainop)}\n"
            f"nSidechain={self.sidechain}\n"
            f"destination={self.destination}\n"
            f"amount={format_money(self.amount)}\n"
            f"mainchainFee={format_money(self.mainchain_fee)}\n"
            f"status={self.status_str()}\n"
            f"hashBlindWTX={hash_to_hex(self.hash_blind_wtx)}\n"
        )


class SidechainWTPrime(SidechainObj):
    """An aggregated transaction paying out a set of withdrawals on the mainchain."""

    OP: ClassVar[int] = SidechainOp.WTPRIME

    sidechainop: Literal[SidechainOp.WTPRIME] = SidechainOp.WTPRIME
    sidechain: int = _sidechain_id()
    wtprime: Transaction = Field(default_factory=Transaction)
    height: int = Field(default=0, ge=-(1 << 31), le=(1 << 31) - 1)
    status: int = Field(default=WTPrimeStatus.CREATED, ge=0, le=255)

    def _encode_fields(self, w: BinaryWriter) -> None:
        w.u8(self.sidechain)
        self.wtprime.encode(w)
        w.i32le(self.height)
        w.u8(self.status)

    @classmethod
    def _decode_fields(cls, r: BinaryReader) -> Dict[str, object]:
        return {
            "sidechain": r.u8(),
            "wtprime": Transaction.decode(r),
            "height": r.i32le(),
            "status": r.u8(),
        }

    def status_str(self) -> str:
        return WTPRIME_STATUS_NAMES.get(self.status, UNKNOWN_STATUS)

    def to_string(self) -> str:
        return (
            f"sidechainop={int(self.sidechainop)}\n"
            f"nSidechain={self.sidechain}\n"
            f"wtprime={self.wtprime.to_string()}\n"
            f"status={self.status_str()}\n"
        )


class SidechainDeposit(SidechainObj):
    """Mainchain funds moved onto the sidechain."""

    OP: ClassVar[int] = SidechainOp.DEPOSIT

    sidechainop: Literal[SidechainOp.DEPOSIT] = SidechainOp.DEPOSIT
    sidechain: int = _sidechain_id()
    destination: str = ""
    payout: int = _amount("Amount paid out to the user")
    tx: Transaction = Field(default_factory=Transaction)
    burn_index: int = Field(default=0, ge=0, le=0xFFFFFFFF)
    n_tx: int = Field(default=0, ge=0, le=0xFFFFFFFF)
    hash_mainchain_block: bytes = _hash("Mainchain block containing the deposit")

    def _encode_fields(self, w: BinaryWriter) -> None:
        w.u8(self.sidechain)
        w.var_str(self.destination)
        w.i64le(self.payout)
        self.tx.encode(w)
        w.u32le(self.burn_index)
        w.u32le(self.n_tx)
        w.hash256(self.hash_mainchain_block)

    @classmethod
    def _decode_fields(cls, r: BinaryReader) -> Dict[str, object]:
        return {
            "sidechain": r.u8(),
            "destination": r.var_str(),
            "payout": r.i64le(),
            "tx": Transaction.decode(r),
            "burn_index": r.u32le(),
            "n_tx": r.u32le(),
            "hash_mainchain_block": r.hash256(),
        }

    def to_string(self) -> str:
        s = (
            f"sidechainop={int(self.sidechainop)}\n"
            f"nSidechain={self.sidechain}\n"
            f"strDest={self.destination}\n"
            f"payout={format_money(self.payout)}\n"
            f"mainchaintxid={hash_to_hex(self.tx.txid)}\n"
            f"nBurnIndex={self.burn_index}\n"
            f"nTx={self.n_tx}\n"
            f"hashMainchainBlock={hash_to_hex(self.hash_mainchain_block)}\n"
            "inputs:\n"
        )
        for txin in self.tx.vin:
            s += txin.prevout.to_string() + "\n"
        return s
