import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .functions import Function

logger = logging.getLogger(__name__)

@dataclass(eq=False)
class Context:
    """Named sub-functions (with their arity) and symbols usable by the parser.

    The parser only reads from a context; building it is up to the caller.
    """
    functions : Dict[str, Tuple[Function, int]] = field(default_factory=dict)
    symbols   : Dict[str, float] = field(default_factory=dict)

    def register_function(self, name, function, arity):
        assert arity in (1, 2, 3), arity
        assert isinstance(function, Function), function
        self.functions[name] = function, arity
        logger.debug("registered function %s (arity %d) = %s", name, arity, function)

    def add_function(self, name, tagged):
        self.register_function(name, tagged.function, tagged.dim)

    def register_symbol(self, name, value):
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"symbol {name} must be finite, got {value!r}")
        self.symbols[name] = value
        logger.debug("registered symbol %s = %r", name, self.symbols[name])

    def lookup_function(self, name) -> Optional[Tuple[Function, int]]:
        return self.functions.get(name)

    def lookup_symbol(self, name) -> Optional[float]:
        return self.symbols.get(name)

    def has_name(self, name):
        return name in self.functions or name in self.symbols
