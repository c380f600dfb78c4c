"""
Material cost strategies.

Pure math. Given slab geometry, dosage and markup, produce the total
Hard-Cem material cost and the derived cost per square foot.
"""
