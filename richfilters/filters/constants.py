UNSTYLED = "unstyled"
ATOMIC = "atomic"
IMAGE = "IMAGE"
HORIZONTAL_RULE = "HORIZONTAL_RULE"

# Text of a well-formed atomic block.
ATOMIC_PLACEHOLDER = " "

# Annotation types that are only valid as the content of an atomic block.
# Hard-coded for now, there is no separate config for block and inline types.
BLOCK_LEVEL_ANNOTATION_TYPES = (HORIZONTAL_RULE, IMAGE)
