"""Common literal values used across ssg_pages.

These constants keep file names, suffixes, and template element ids
centralized so the generator, scaffold, and tests can import the same values
without drifting. Intended for internal use within the ssg_pages package.

Examples
--------
>>> from ssg_pages import _constants
>>> _constants.SOURCE_SUFFIX, _constants.OUTPUT_SUFFIX
('.md', '.html')
>>> _constants.CONTENT_SLOT_ID
'ssg-inject-content'
"""

SOURCE_SUFFIX = ".md"
OUTPUT_SUFFIX = ".html"

TEMPLATE_FILENAME = "template.html"
STYLESHEET_FILENAME = "style.css"

CONTENT_SLOT_ID = "ssg-inject-content"
SIDEBAR_SLOT_ID = "ssg-inject-sidebar-links"
BREADCRUMB_SLOT_ID = "ssg-inject-breadcrumb-links"
STYLESHEET_SLOT_ID = "ssg-inject-stylesheet"

HOME_LABEL = "Home"
PARENT_SEGMENT = "../"
