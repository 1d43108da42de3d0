"""
HTML extraction engine for an alternate paste site front end.

This package turns parsed pages of the paste site into immutable records
(pastes, comments, users, archive listings), tolerating missing markup
wherever a sensible default exists.

See pasteparse.extractors for the entry points.
"""
