"""Common literal values used across docs_site.

These constants keep sentinel values, path segments, and output filenames
centralized so navigation builders, generators, and tests can import the same
values without drifting. Intended for internal use within the docs_site
package.

Examples
--------
>>> from docs_site import _constants
>>> _constants.DOCS_HREF_PREFIX + "docs/start-install"
'/docs/docs/start-install'
>>> _constants.DEFAULT_ORDER
99
"""

DEFAULT_ORDER = 99
DOCS_HREF_PREFIX = "/docs/"

DOCS_SEGMENT = "docs"
API_SEGMENT = "api"
CODELABS_SEGMENT = "codelabs"

NAVIGATION_FILENAME = "navigation.json"
PAGE_TEMPLATE = "doc_page.jinja"
