"""splitcheck — splittable random generation for property-based testing."""

__version__ = "0.5.0"

from splitcheck.core.random import GeneratorState as GeneratorState
from splitcheck.core.random import make_generator as make_generator
from splitcheck.core.random import random_bigint as random_bigint
from splitcheck.core.random import random_double as random_double
from splitcheck.core.random import random_in_range as random_in_range
from splitcheck.core.random import random_long as random_long
from splitcheck.core.random import random_next as random_next
from splitcheck.core.random import random_split as random_split
from splitcheck.properties.property import CheckResult as CheckResult
from splitcheck.properties.property import for_all as for_all
from splitcheck.properties.property import property_of as property_of
from splitcheck.properties.runner import QuickCheckResult as QuickCheckResult
from splitcheck.properties.runner import quick_check as quick_check
from splitcheck.utils.exceptions import InvalidRangeError as InvalidRangeError
from splitcheck.utils.exceptions import PrecisionPreconditionError as PrecisionPreconditionError
from splitcheck.utils.exceptions import SplitcheckError as SplitcheckError
