# wordfilter/engine/__init__.py

"""Engine package providing the keyword trie, character classifier and scanner.

This package contains the components that compile the sensitive word list
and mask keyword occurrences in a single pass over the input text.
"""
