"""Properties and the runner that checks them."""

from splitcheck.properties.property import CheckResult as CheckResult
from splitcheck.properties.property import check_result_p as check_result_p
from splitcheck.properties.property import for_all as for_all
from splitcheck.properties.property import passed as passed
from splitcheck.properties.property import property_of as property_of
from splitcheck.properties.runner import QuickCheckResult as QuickCheckResult
from splitcheck.properties.runner import quick_check as quick_check
