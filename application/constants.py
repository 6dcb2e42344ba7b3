"""Application-level constants."""

# Top-level key of a document holding several learning objects
LEARNING_OBJECTS_KEY = "learningObjects"

# Suffix of canonical copies written next to the source document
CANONICAL_SUFFIX = ".canonical.json"
