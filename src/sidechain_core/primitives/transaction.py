"""
Host-chain transaction value types.

``Transaction`` carries the mainchain transactions that withdrawal bundles
and deposits embed. Encoding follows the host chain exactly, including the
segregated-witness extended format when any input has witness data.
"""

from __future__ import annotations
from typing import List

from pydantic import BaseModel, Field, ValidationError, model_validator

from ..codec.hashes import ZERO_HASH, hash256, hash_to_hex
from ..codec.reader import BinaryReader
from ..codec.writer import BinaryWriter
from ..money import COIN, INT64_MAX, INT64_MIN
from ..runtime.errors import DecodeError

NULL_INDEX = 0xFFFFFFFF
SEQUENCE_FINAL = 0xFFFFFFFF
CURRENT_VERSION = 2

WITNESS_FLAG = 0x01


class OutPoint(BaseModel):
    """Reference to one output of a previous transaction."""

    txid: bytes = Field(default=ZERO_HASH, min_length=32, max_length=32)
    n: int = Field(default=NULL_INDEX, ge=0, le=0xFFFFFFFF)

    def is_null(self) -> bool:
        return self.txid == ZERO_HASH and self.n == NULL_INDEX

    def encode(self, w: BinaryWriter) -> None:
        w.hash256(self.txid)
        w.u32le(self.n)

    @classmethod
    def decode(cls, r: BinaryReader) -> OutPoint:
        return cls(txid=r.hash256(), n=r.u32le())

    def to_string(self) -> str:
        return f"COutPoint({hash_to_hex(self.txid)[:10]}, {self.n})"


class TxIn(BaseModel):
    """Transaction input."""

    prevout: OutPoint = Field(default_factory=OutPoint)
    script_sig: bytes = b""
    sequence: int = Field(default=SEQUENCE_FINAL, ge=0, le=0xFFFFFFFF)
    witness: List[bytes] = Field(default_factory=list)

    def encode(self, w: BinaryWriter) -> None:
        self.prevout.encode(w)
        w.var_bytes(self.script_sig)
        w.u32le(self.sequence)

    @classmethod
    def decode(cls, r: BinaryReader) -> TxIn:
        prevout = OutPoint.decode(r)
        script_sig = r.var_bytes()
        sequence = r.u32le()
        return cls(prevout=prevout, script_sig=script_sig, sequence=sequence)

    def to_string(self) -> str:
        s = "CTxIn(" + self.prevout.to_string()
        if self.prevout.is_null():
            s += f", coinbase {self.script_sig.hex()}"
        else:
            s += f", scriptSig={self.script_sig.hex()[:24]}"
        if self.sequence != SEQUENCE_FINAL:
            s += f", nSequence={self.sequence}"
        return s + ")"

    def witness_string(self) -> str:
        return "CScriptWitness(" + ", ".join(item.hex() for item in self.witness) + ")"


class TxOut(BaseModel):
    """Transaction output."""

    value: int = Field(default=-1, ge=INT64_MIN, le=INT64_MAX)
    script_pubkey: bytes = b""

    def encode(self, w: BinaryWriter) -> None:
        w.i64le(self.value)
        w.var_bytes(self.script_pubkey)

    @classmethod
    def decode(cls, r: BinaryReader) -> TxOut:
        value = r.i64le()
        return cls(value=value, script_pubkey=r.var_bytes())

    def to_string(self) -> str:
        # truncating division, remainder keeps the sign of the value
        whole = abs(self.value) // COIN * (-1 if self.value < 0 else 1)
        frac = self.value - whole * COIN
        return f"CTxOut(nValue={whole}.{frac:08d}, scriptPubKey={self.script_pubkey.hex()[:30]})"


class Transaction(BaseModel):
    """
    Mainchain transaction.

    Wire layout: version (i32), inputs, outputs, lock time (u32). When
    any input carries witness data the extended layout is used: an empty
    input vector and a flag byte precede the inputs, and one witness stack
    per input follows the outputs.
    """

    version: int = Field(default=CURRENT_VERSION, ge=-(1 << 31), le=(1 << 31) - 1)
    vin: List[TxIn] = Field(default_factory=list)
    vout: List[TxOut] = Field(default_factory=list)
    lock_time: int = Field(default=0, ge=0, le=0xFFFFFFFF)

    @model_validator(mode="after")
    def check_inputs_present(self) -> Transaction:
        # an empty input vector is the extended-format marker on the wire
        if self.vout and not self.vin:
            raise ValueError("transaction with outputs must have inputs")
        return self

    def has_witness(self) -> bool:
        return any(txin.witness for txin in self.vin)

    def encode(self, w: BinaryWriter, allow_witness: bool = True) -> None:
        w.i32le(self.version)
        flags = WITNESS_FLAG if allow_witness and self.has_witness() else 0
        if flags:
            w.compact_size(0)
            w.u8(flags)
        w.compact_size(len(self.vin))
        for txin in self.vin:
            txin.encode(w)
        w.compact_size(len(self.vout))
        for txout in self.vout:
            txout.encode(w)
        if flags & WITNESS_FLAG:
            for txin in self.vin:
                w.compact_size(len(txin.witness))
                for item in txin.witness:
                    w.var_bytes(item)
        w.u32le(self.lock_time)

    @classmethod
    def decode(cls, r: BinaryReader, allow_witness: bool = True) -> Transaction:
        version = r.i32le()
        flags = 0
        vin = [TxIn.decode(r) for _ in range(r.compact_size())]
        vout: List[TxOut] = []
        if not vin and allow_witness:
            # an empty input vector is the extended-format marker
            flags = r.u8()
            if flags != 0:
                vin = [TxIn.decode(r) for _ in range(r.compact_size())]
                vout = [TxOut.decode(r) for _ in range(r.compact_size())]
        else:
            vout = [TxOut.decode(r) for _ in range(r.compact_size())]
        if flags & WITNESS_FLAG and allow_witness:
            flags ^= WITNESS_FLAG
            for txin in vin:
                txin.witness = [r.var_bytes() for _ in range(r.compact_size())]
            if not any(txin.witness for txin in vin):
                raise DecodeError("Superfluous witness record")
        if flags:
            raise DecodeError("Unknown transaction optional data", details={"flags": flags})
        lock_time = r.u32le()
        try:
            return cls(version=version, vin=vin, vout=vout, lock_time=lock_time)
        except ValidationError as e:
            raise DecodeError(f"Invalid transaction: {e.errors()[0]['msg']}", cause=e) from e

    def serialize(self, allow_witness: bool = True) -> bytes:
        w = BinaryWriter()
        self.encode(w, allow_witness)
        return w.to_bytes()

    @classmethod
    def deserialize(cls, data: bytes) -> Transaction:
        r = BinaryReader(data)
        tx = cls.decode(r)
        if not r.eof:
            raise DecodeError("Trailing bytes after transaction", details={"remaining": r.remaining})
        return tx

    @property
    def txid(self) -> bytes:
        """Double SHA-256 of the non-witness serialization."""
        return hash256(self.serialize(allow_witness=False))

    @property
    def wtxid(self) -> bytes:
        return hash256(self.serialize())

    def to_string(self) -> str:
        s = (f"CTransaction(hash={hash_to_hex(self.txid)[:10]}, ver={self.version}, "
             f"vin.size={len(self.vin)}, vout.size={len(self.vout)}, nLockTime={self.lock_time})\n")
        for txin in self.vin:
            s += "    " + txin.to_string() + "\n"
        for txin in self.vin:
            s += "    " + txin.witness_string() + "\n"
        for txout in self.vout:
            s += "    " + txout.to_string() + "\n"
        return s
