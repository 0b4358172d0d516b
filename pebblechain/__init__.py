from .Chain import HashChain, ChainInitError, generate, generate_full
from .Pebble import Pebble
from .Digest import Digest, HashlibDigest, Sha256, Sha512, Blake2b, digest_for
from .Utils import create_powers, log_2

__version__ = "0.1.0"
VERSION = __version__

__all__ = ["HashChain", "ChainInitError", "generate", "generate_full", "Pebble",
           "Digest", "HashlibDigest", "Sha256", "Sha512", "Blake2b", "digest_for",
           "create_powers", "log_2"]
