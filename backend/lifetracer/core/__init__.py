"""
Life Tracer core.

- palette: closed sets of category colors and icons
- state: immutable snapshot of one owner's timeline state
- timeline: layout engine for the linear and global views
"""
