import os
from dataclasses import dataclass
from typing import Mapping, Optional

from solders.pubkey import Pubkey


DEFAULT_PROGRAM_ID = "4QPCBtQ1qSwTmUy9yrGZoqCjZPen8eCE2HcHtKeNWYj6"
DEFAULT_RPC_URL = "http://localhost:8899"

_FALSY = {"0", "false", "no", "off", ""}


def load_pubkey(value: str, env_name: str) -> Pubkey:
    try:
        return Pubkey.from_string(value)
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"{env_name} is not a valid pubkey: {exc}") from exc


@dataclass(frozen=True)
class Settings:
    program_id: Pubkey
    rpc_url: str = DEFAULT_RPC_URL
    explorer_cluster: str = "devnet"
    private_key: Optional[str] = None
    env_file: str = ".env"
    airdrop_enabled: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        if environ is None:
            environ = os.environ
        return cls(
            program_id=load_pubkey(environ.get("PROGRAM_ID", DEFAULT_PROGRAM_ID), "PROGRAM_ID"),
            rpc_url=environ.get("RPC_URL", DEFAULT_RPC_URL),
            explorer_cluster=environ.get("EXPLORER_CLUSTER", "devnet"),
            private_key=environ.get("PRIVATE_KEY") or None,
            env_file=environ.get("ENV_FILE", ".env"),
            airdrop_enabled=environ.get("AIRDROP_ENABLED", "true").strip().lower() not in _FALSY,
        )
