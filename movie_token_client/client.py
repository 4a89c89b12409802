import json
from typing import Tuple

from base58 import b58decode
from borsh_construct import CStruct, U8
from solana.rpc.api import Client
from solana.rpc.core import RPCException
from solders.hash import Hash
from solders.instruction import AccountMeta, Instruction
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.transaction import Transaction


SYS_PROGRAM_ID = Pubkey.from_string("11111111111111111111111111111111")
TOKEN_PROGRAM_ID = Pubkey.from_string("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")
SYSVAR_RENT_ID = Pubkey.from_string("SysvarRent111111111111111111111111111111111")

TOKEN_MINT_SEED = b"token_mint"
TOKEN_AUTH_SEED = b"token_auth"

EXPLORER_TX_URL = "https://explorer.solana.com/tx/{signature}?cluster={cluster}"


# First data byte selects the program handler; 3 is initialize_token_mint.
INITIALIZE_MINT_VARIANT = 3
INSTRUCTION_LAYOUT = CStruct("variant" / U8)


def log(msg: str) -> None:
    print(msg, flush=True)


def parse_keypair(raw: str) -> Keypair:
    """Accepts a JSON byte array (solana-keygen format) or a base58 secret."""
    raw = raw.strip()
    try:
        if raw.startswith("["):
            return Keypair.from_bytes(bytes(json.loads(raw)))
        return Keypair.from_bytes(b58decode(raw))
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"PRIVATE_KEY is not a valid keypair: {exc}") from exc


def pda_token_mint(program_id: Pubkey) -> Tuple[Pubkey, int]:
    return Pubkey.find_program_address([TOKEN_MINT_SEED], program_id)


def pda_token_auth(program_id: Pubkey) -> Tuple[Pubkey, int]:
    return Pubkey.find_program_address([TOKEN_AUTH_SEED], program_id)


def encode_variant(variant: int) -> bytes:
    return INSTRUCTION_LAYOUT.build({"variant": variant})


def instruction_initialize_mint(program_id: Pubkey, signer: Pubkey) -> Instruction:
    # Account order is fixed by the program's initialize_token_mint handler.
    data = encode_variant(INITIALIZE_MINT_VARIANT)
    token_mint, _ = pda_token_mint(program_id)
    token_auth, _ = pda_token_auth(program_id)
    keys = [
        AccountMeta(signer, is_signer=True, is_writable=False),
        AccountMeta(token_mint, is_signer=False, is_writable=True),
        AccountMeta(token_auth, is_signer=False, is_writable=False),
        AccountMeta(SYS_PROGRAM_ID, is_signer=False, is_writable=False),
        AccountMeta(TOKEN_PROGRAM_ID, is_signer=False, is_writable=False),
        AccountMeta(SYSVAR_RENT_ID, is_signer=False, is_writable=False),
    ]
    return Instruction(program_id=program_id, data=data, accounts=keys)


def check_confirmed(resp, signature) -> None:
    """Raises if the confirmed status carries an execution error."""
    statuses = resp.value or []
    status = statuses[0] if statuses else None
    if status is not None and status.err is not None:
        raise RPCException(f"transaction {signature} failed: {status.err}")


def build_transaction(instruction: Instruction, signer: Keypair, blockhash: Hash) -> Transaction:
    return Transaction.new_signed_with_payer([instruction], signer.pubkey(), [signer], blockhash)


def send_transaction(client: Client, instruction: Instruction, signer: Keypair) -> str:
    blockhash = client.get_latest_blockhash().value.blockhash
    tx = build_transaction(instruction, signer, blockhash)
    resp = client.send_raw_transaction(bytes(tx))
    signature = resp.value
    check_confirmed(client.confirm_transaction(signature), signature)
    return str(signature)


def explorer_url(signature: str, cluster: str) -> str:
    return EXPLORER_TX_URL.format(signature=signature, cluster=cluster)
