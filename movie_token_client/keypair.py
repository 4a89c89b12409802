"""Signer provisioning for the init script.

The signer comes from ``PRIVATE_KEY`` when set. Otherwise a new keypair is
generated and written back to the env file so later runs reuse it. On test
clusters a low balance is topped up with an airdrop.
"""

import json

from dotenv import set_key
from solana.rpc.api import Client
from solders.keypair import Keypair

from movie_token_client.client import check_confirmed, log, parse_keypair
from movie_token_client.settings import Settings


LAMPORTS_PER_SOL = 1_000_000_000
MIN_BALANCE_LAMPORTS = LAMPORTS_PER_SOL
AIRDROP_LAMPORTS = LAMPORTS_PER_SOL


def persist_keypair(keypair: Keypair, env_file: str) -> None:
    set_key(env_file, "PRIVATE_KEY", json.dumps(list(bytes(keypair))))


def load_or_create_keypair(settings: Settings) -> Keypair:
    if settings.private_key:
        return parse_keypair(settings.private_key)
    keypair = Keypair()
    persist_keypair(keypair, settings.env_file)
    log(f"generated new signer, saved to {settings.env_file}")
    return keypair


def airdrop_if_required(client: Client, keypair: Keypair) -> int:
    """Returns the signer balance after any airdrop."""
    pubkey = keypair.pubkey()
    balance = client.get_balance(pubkey).value
    if balance >= MIN_BALANCE_LAMPORTS:
        return balance
    log(f"balance {balance} lamports below minimum, requesting airdrop")
    signature = client.request_airdrop(pubkey, AIRDROP_LAMPORTS).value
    check_confirmed(client.confirm_transaction(signature), signature)
    return client.get_balance(pubkey).value


def initialize_keypair(client: Client, settings: Settings) -> Keypair:
    keypair = load_or_create_keypair(settings)
    log(f"signer: {keypair.pubkey()}")
    if settings.airdrop_enabled:
        airdrop_if_required(client, keypair)
    return keypair
