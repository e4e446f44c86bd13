"""
This package contains all modules related to decoding raw LWCP text.

Sub-packages handle specific parts of a message:

- ``envelope``: The operation / object / sub-object / id prefix.
- ``properties``: The comma or whitespace separated property list.
- ``arrays``: Bracketed array literals inside property values.
- ``message``: The ``Message`` model and the top-level ``parse`` entry point.
"""
