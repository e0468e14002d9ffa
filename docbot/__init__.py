__title__ = 'docbot'
__license__ = 'MIT'
__version__ = "0.1.0"

from .arguments import *
from .commands import *
from .docs import *
from .faults import *
from .folding import *
from .help import *
from .logs import *
from .paths import *
from .rendering import *
from .suggest import *
from .tokenize import *
from .trie import *
from .usage import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
))

version_info = VersionInfo(0, 1, 0, "final", 0)

__all__ = (
    "__title__",
    "__license__",
    "__version__",
    "version_info",
)

# Load the exposed API of the field declarations
__all__ += arguments.__all__  # type: ignore[attr-defined]
# Load the exposed API of the command types
__all__ += commands.__all__  # type: ignore[attr-defined]
# Load the exposed API of the documentation parser
__all__ += docs.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the folders
__all__ += folding.__all__  # type: ignore[attr-defined]
# Load the exposed API of the help topics
__all__ += help.__all__  # type: ignore[attr-defined]
# Load the exposed API of the logging setup
__all__ += logs.__all__  # type: ignore[attr-defined]
# Load the exposed API of the command paths
__all__ += paths.__all__  # type: ignore[attr-defined]
# Load the exposed API of the rich renderers
__all__ += rendering.__all__  # type: ignore[attr-defined]
# Load the exposed API of the suggestions
__all__ += suggest.__all__  # type: ignore[attr-defined]
# Load the exposed API of the tokenizer (the module name is shadowed by its function)
__all__ += __import__("importlib").import_module(".tokenize", __name__).__all__
# Load the exposed API of the identifier trie
__all__ += trie.__all__  # type: ignore[attr-defined]
# Load the exposed API of the usage parser
__all__ += usage.__all__  # type: ignore[attr-defined]
