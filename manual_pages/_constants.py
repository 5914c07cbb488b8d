"""Common literal values used across manual_pages.

These constants keep output filenames and anchors centralized so the resolver,
the table-of-contents builders, templates, and tests can import the same values
without drifting. Intended for internal use within the manual_pages package.

Examples
--------
>>> from manual_pages import _constants
>>> _constants.REFERENCE_FILENAME
'identifiers.html'
>>> _constants.MANUAL_PAGE_TEMPLATE.format(slug="usage")
'manual/usage.html'
"""

MANUAL_INDEX_FILENAME = "manual/index.html"
MANUAL_INDEX_TITLE = "Manual"
MANUAL_PAGE_TEMPLATE = "manual/{slug}.html"
REFERENCE_FILENAME = "identifiers.html"
INDENT_CLASS_PREFIX = "indent-h"
