"""Host settings read from the environment (and a .env file, via python-dotenv)."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PLAYER_NAME = "Player"
DEFAULT_AUTOMATED_SEATS = 3
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_TURNS = 1000


def _int_var(env: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    player_name: str = DEFAULT_PLAYER_NAME
    automated_seats: int = DEFAULT_AUTOMATED_SEATS
    seed: Optional[int] = None
    log_level: str = DEFAULT_LOG_LEVEL
    max_turns: int = DEFAULT_MAX_TURNS

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``env`` (defaults to os.environ).

        Call ``load_dotenv()`` first if a .env file should be honoured.
        """
        env = os.environ if env is None else env
        return cls(
            player_name=env.get("UNO_PLAYER_NAME", "").strip() or DEFAULT_PLAYER_NAME,
            automated_seats=_int_var(env, "UNO_AUTOMATED_SEATS", DEFAULT_AUTOMATED_SEATS),
            seed=_int_var(env, "UNO_SEED", None),
            log_level=env.get("UNO_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL,
            max_turns=_int_var(env, "UNO_MAX_TURNS", DEFAULT_MAX_TURNS),
        )
