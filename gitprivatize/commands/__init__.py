from .init import init
from .unlock import unlock
from .export import export
from .filters import clean, smudge, diff
from .encrypt import encrypt
from .decrypt import decrypt

__all__ = [
    init,
    unlock,
    export,
    clean,
    smudge,
    diff,
    encrypt,
    decrypt,
]

ALIASES = {
    "git-init": init,
    "git-unlock": unlock,
    "export-key": export,
}
