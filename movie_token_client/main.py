import os
import sys
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from solana.rpc.api import Client
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from movie_token_client.client import (
    explorer_url,
    instruction_initialize_mint,
    log,
    pda_token_auth,
    pda_token_mint,
    send_transaction,
)
from movie_token_client.keypair import initialize_keypair
from movie_token_client.settings import Settings


@dataclass(frozen=True)
class Result:
    signature: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def describe_error(err: Exception) -> str:
    # SolanaRpcException keeps its text in error_msg and the transport error on __cause__.
    parts = [type(err).__name__, getattr(err, "error_msg", None) or str(err)]
    if err.__cause__ is not None:
        parts.append(str(err.__cause__))
    return ": ".join(part for part in parts if part)


def initialize_program_token_mint(client: Client, signer: Keypair, program_id: Pubkey) -> str:
    token_mint, _ = pda_token_mint(program_id)
    token_auth, _ = pda_token_auth(program_id)
    log(f"token mint: {token_mint}")
    log(f"mint authority: {token_auth}")
    instruction = instruction_initialize_mint(program_id, signer.pubkey())
    return send_transaction(client, instruction, signer)


def main(settings: Optional[Settings] = None, client: Optional[Client] = None) -> Result:
    try:
        if settings is None:
            settings = Settings.from_env()
        if client is None:
            client = Client(settings.rpc_url)
        signer = initialize_keypair(client, settings)
        signature = initialize_program_token_mint(client, signer, settings.program_id)
    except Exception as err:  # noqa: BLE001
        return Result(error=err)
    log(f"Transaction submitted: {explorer_url(signature, settings.explorer_cluster)}")
    return Result(signature=signature)


def run() -> int:
    load_dotenv(os.environ.get("ENV_FILE", ".env"))
    result = main()
    if not result.ok:
        log(f"Error: {describe_error(result.error)}")
        return 1
    log("Finished successfully")
    return 0


if __name__ == "__main__":
    sys.exit(run())
