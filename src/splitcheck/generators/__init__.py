"""Generator combinators built on the splittable random core."""

from splitcheck.generators.core import Generator as Generator
from splitcheck.generators.core import bind as bind
from splitcheck.generators.core import booleans as booleans
from splitcheck.generators.core import call_gen as call_gen
from splitcheck.generators.core import choose as choose
from splitcheck.generators.core import choose_double as choose_double
from splitcheck.generators.core import choose_long as choose_long
from splitcheck.generators.core import doubles as doubles
from splitcheck.generators.core import elements as elements
from splitcheck.generators.core import fmap as fmap
from splitcheck.generators.core import generate as generate
from splitcheck.generators.core import generator_p as generator_p
from splitcheck.generators.core import integers as integers
from splitcheck.generators.core import list_of as list_of
from splitcheck.generators.core import naturals as naturals
from splitcheck.generators.core import one_of as one_of
from splitcheck.generators.core import resize as resize
from splitcheck.generators.core import return_ as return_
from splitcheck.generators.core import sample as sample
from splitcheck.generators.core import sized as sized
from splitcheck.generators.core import split_n as split_n
from splitcheck.generators.core import tuple_ as tuple_
