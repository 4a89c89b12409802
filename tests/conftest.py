from types import SimpleNamespace

import pytest
from solders.hash import Hash
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.transaction import Transaction

from movie_token_client.settings import DEFAULT_PROGRAM_ID


class FakeClient:
    """Stands in for solana.rpc.api.Client; records what the code sends."""

    def __init__(self, balance=0, send_error=None, confirm_err=None):
        self.balance = balance
        self.send_error = send_error
        self.confirm_err = confirm_err
        self.sent = []
        self.confirmed = []
        self.airdrops = []

    def get_latest_blockhash(self):
        return SimpleNamespace(value=SimpleNamespace(blockhash=Hash.default()))

    def send_raw_transaction(self, txn, opts=None):
        if self.send_error is not None:
            raise self.send_error
        tx = Transaction.from_bytes(txn)
        self.sent.append(tx)
        return SimpleNamespace(value=tx.signatures[0])

    def confirm_transaction(self, signature, commitment=None):
        self.confirmed.append(signature)
        return SimpleNamespace(value=[SimpleNamespace(err=self.confirm_err)])

    def get_balance(self, pubkey, commitment=None):
        return SimpleNamespace(value=self.balance)

    def request_airdrop(self, pubkey, lamports, commitment=None):
        self.airdrops.append((pubkey, lamports))
        self.balance += lamports
        return SimpleNamespace(value=Signature.default())


@pytest.fixture
def program_id():
    return Pubkey.from_string(DEFAULT_PROGRAM_ID)


@pytest.fixture
def signer():
    return Keypair()


@pytest.fixture
def fake_client():
    return FakeClient(balance=5_000_000_000)


@pytest.fixture
def make_client():
    return FakeClient
