"""
RangedRandom Constants - TigerStyle

All limits are explicit, named with units, big-endian naming convention.
Category comes first, specifics last: INT32_VALUE_MAX not MAX_INT32.
"""

# =============================================================================
# Integer Widths
# =============================================================================

INT8_VALUE_MIN: int = -(2**7)  # -128
INT8_VALUE_MAX: int = 2**7 - 1  # 127

INT16_VALUE_MIN: int = -(2**15)  # -32768
INT16_VALUE_MAX: int = 2**15 - 1  # 32767

CHAR_CODE_MIN: int = 0  # UTF-16 code unit
CHAR_CODE_MAX: int = 2**16 - 1  # 0xFFFF

INT32_VALUE_MIN: int = -(2**31)
INT32_VALUE_MAX: int = 2**31 - 1

INT64_VALUE_MIN: int = -(2**63)
INT64_VALUE_MAX: int = 2**63 - 1

# =============================================================================
# Uniform Draws
# =============================================================================

FLOAT32_MANTISSA_BITS: int = 24  # float32 draws have 2**-24 granularity
FLOAT64_MANTISSA_BITS: int = 53  # float64 draws have 2**-53 granularity

# =============================================================================
# Seeds
# =============================================================================

SEED_VALUE_MIN: int = 0
SEED_VALUE_MAX: int = 2**63 - 1  # fork() derives child seeds in this range
