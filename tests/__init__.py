"""
Only the root tests directory carries an __init__.py; the unit/ and integration/
subdirectories mirror the `colbert` package layout as PEP 420 namespace
directories. Test module basenames are therefore kept unique across the tree.
"""
