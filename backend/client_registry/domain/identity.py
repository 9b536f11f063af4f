"""Client identifier generation."""

import random
import time
import uuid


def generate_client_id() -> str:
    """Return a new random client id.

    UUID4 draws from the OS entropy source; on a platform without one the id
    falls back to ``cli_<epoch-ms>_<8 hex chars>``.
    """
    try:
        return str(uuid.uuid4())
    except NotImplementedError:
        return f"cli_{int(time.time() * 1000)}_{random.getrandbits(32):08x}"
