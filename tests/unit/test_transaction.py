"""
Mainchain transaction encoding tests.
"""

import pytest
from pydantic import ValidationError

from sidechain_core.codec import hash256
from sidechain_core.codec.reader import BinaryReader
from sidechain_core.money import COIN, INT64_MAX, INT64_MIN
from sidechain_core.primitives import OutPoint, Transaction, TxIn, TxOut
from sidechain_core.runtime.errors import DecodeError

from helpers.factories import mk_hash, mk_transaction
from helpers.parity import assert_hex_equal


@pytest.mark.unit
class TestTransactionEncoding:
    """Legacy and witness layouts."""

    def test_legacy_layout(self):
        tx = Transaction(
            version=1,
            vin=[TxIn(prevout=OutPoint(txid=mk_hash(0xAA), n=1), script_sig=b"\x51")],
            vout=[TxOut(value=COIN, script_pubkey=b"\x6a")],
            lock_time=5,
        )
        expected = (
            "01000000"                  # version
            "01"                        # vin count
            + "aa" * 32 + "01000000"    # prevout
            + "0151"                    # scriptSig
            + "ffffffff"                # sequence
            + "01"                      # vout count
            + "00e1f50500000000"        # value
            + "016a"                    # scriptPubKey
            + "05000000"                # lock time
        )
        assert_hex_equal(tx.serialize(), expected, "legacy transaction")

    def test_roundtrip(self):
        tx = mk_transaction(n_inputs=3, n_outputs=2)
        assert Transaction.deserialize(tx.serialize()) == tx

    def test_witness_roundtrip(self):
        tx = mk_transaction(n_inputs=2, n_outputs=1, witness=[b"\x01\x02", b""])
        data = tx.serialize()
        # marker and flag follow the version
        assert data[4:6] == b"\x00\x01"
        assert Transaction.deserialize(data) == tx

    def test_txid_ignores_witness(self):
        plain = mk_transaction()
        witnessed = mk_transaction(witness=[b"\xde\xad"])
        assert plain.txid == witnessed.txid
        assert witnessed.wtxid != witnessed.txid
        assert plain.txid == hash256(plain.serialize())

    def test_empty_transaction_roundtrip(self):
        tx = Transaction()
        assert Transaction.deserialize(tx.serialize()) == tx

    def test_superfluous_witness_rejected(self):
        txin = TxIn(prevout=OutPoint(txid=mk_hash(1), n=0))
        body = Transaction(vin=[txin]).serialize()
        # version, marker, flag, vin, no vout, empty witness stack, lock time
        data = body[:4] + b"\x00\x01" + body[4:-4] + b"\x00" + body[-4:]
        with pytest.raises(DecodeError):
            Transaction.deserialize(data)

    def test_unknown_flags_rejected(self):
        data = b"\x02\x00\x00\x00" + b"\x00\x02" + b"\x00" + b"\x00" + b"\x00\x00\x00\x00"
        with pytest.raises(DecodeError):
            Transaction.deserialize(data)

    def test_trailing_bytes_rejected(self):
        with pytest.raises(DecodeError):
            Transaction.deserialize(mk_transaction().serialize() + b"\x00")

    def test_outputs_without_inputs_rejected(self):
        with pytest.raises(ValidationError):
            Transaction(vout=[TxOut(value=COIN)])

    def test_outputs_without_inputs_not_decoded(self):
        # version, no inputs, one output, lock time
        data = bytes.fromhex("02000000" "00" "01" "00e1f50500000000" "00" "00000000")
        with pytest.raises(DecodeError):
            Transaction.decode(BinaryReader(data), allow_witness=False)
        with pytest.raises(DecodeError):
            Transaction.deserialize(data)


@pytest.mark.unit
class TestTransactionDisplay:
    """Diagnostic rendering."""

    def test_outpoint(self):
        assert OutPoint(txid=mk_hash(0x22), n=1).to_string() == "COutPoint(2222222222, 1)"

    def test_txout(self):
        out = TxOut(value=150 * COIN + 5, script_pubkey=b"\x6a")
        assert out.to_string() == "CTxOut(nValue=150.00000005, scriptPubKey=6a)"

    @pytest.mark.parametrize("value,rendered", [
        (-5, "0.-0000005"),
        (-(150 * COIN + 5), "-150.-0000005"),
        (-COIN, "-1.00000000"),
        (INT64_MAX, "92233720368.54775807"),
        (INT64_MIN, "-92233720368.-54775808"),
    ])
    def test_txout_negative_and_extreme_values(self, value, rendered):
        assert TxOut(value=value).to_string() == f"CTxOut(nValue={rendered}, scriptPubKey=)"

    def test_txin_sequence_shown_when_not_final(self):
        txin = TxIn(prevout=OutPoint(txid=mk_hash(0x22), n=0), script_sig=b"\x51", sequence=7)
        assert txin.to_string() == "CTxIn(COutPoint(2222222222, 0), scriptSig=51, nSequence=7)"

    def test_coinbase_input(self):
        txin = TxIn(script_sig=b"\x03\x01")
        assert txin.to_string() == (
            "CTxIn(COutPoint(0000000000, 4294967295), coinbase 0301)"
        )

    def test_transaction_lines(self):
        tx = mk_transaction(n_inputs=2, n_outputs=3)
        lines = tx.to_string().splitlines()
        assert lines[0].startswith("CTransaction(hash=")
        assert "vin.size=2, vout.size=3, nLockTime=0" in lines[0]
        # header, inputs, witnesses, outputs
        assert len(lines) == 1 + 2 + 2 + 3
