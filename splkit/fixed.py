"""Fixed-point integer primitives: wrapping, saturation and bit counting."""

INT16_MIN = -0x8000
INT16_MAX = 0x7FFF
INT32_MIN = -0x80000000
INT32_MAX = 0x7FFFFFFF
UINT32_MAX = 0xFFFFFFFF

# For each 32-bit value of the form 0...01...1, the entry at index
# ((n * 0x8C0B2891) mod 2**32) >> 26 is its number of leading zero bits.
_CLZ_TABLE = (
    32, 8, 17, -1, -1, 14, -1, -1, -1, 20, -1, -1, -1, 28, -1, 18,
    -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, 0, 26, 25, 24,
    4, 11, 23, 31, 3, 7, 10, 16, 22, 30, -1, -1, 2, 6, 13, 9,
    -1, 15, -1, 21, -1, 29, 19, -1, -1, -1, -1, -1, 1, 27, 5, 12,
)


def wrap_int16(value):
    """Reduce an integer to the signed 16-bit range with two's-complement wrap."""
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def wrap_int32(value):
    """Reduce an integer to the signed 32-bit range with two's-complement wrap."""
    return ((value + 0x80000000) & 0xFFFFFFFF) - 0x80000000


def wrap_uint32(value):
    """Reduce an integer to the unsigned 32-bit range."""
    return value & UINT32_MAX


def sat_w32_to_w16(value):
    """Saturate a value into the signed 16-bit range."""
    if value > INT16_MAX:
        return INT16_MAX
    if value < INT16_MIN:
        return INT16_MIN
    return value


def _sat_w32(value):
    if value > INT32_MAX:
        return INT32_MAX
    if value < INT32_MIN:
        return INT32_MIN
    return value


def add_sat_w32(a, b):
    """Saturated 32-bit addition."""
    return _sat_w32(a + b)


def sub_sat_w32(a, b):
    """Saturated 32-bit subtraction."""
    return _sat_w32(a - b)


def add_sat_w16(a, b):
    """Saturated 16-bit addition."""
    return sat_w32_to_w16(a + b)


def sub_sat_w16(a, b):
    """Saturated 16-bit subtraction."""
    return sat_w32_to_w16(a - b)


def count_leading_zeros32_not_builtin(n):
    """Count leading zeros of a 32-bit value with the multiply-and-lookup method."""
    n = wrap_uint32(n)
    for shift in (1, 2, 4, 8, 16):
        n |= n >> shift
    return _CLZ_TABLE[wrap_uint32(n * 0x8C0B2891) >> 26]


def count_leading_zeros64_not_builtin(n):
    """Count leading zeros of a 64-bit value using the 32-bit lookup method."""
    n &= 0xFFFFFFFFFFFFFFFF
    leading_zeros = 32 if n >> 32 == 0 else 0
    return leading_zeros + count_leading_zeros32_not_builtin(
        wrap_uint32(n >> (32 - leading_zeros))
    )


def count_leading_zeros32(n):
    """Number of leading zero bits in a 32-bit value."""
    return 32 - wrap_uint32(n).bit_length()


def count_leading_zeros64(n):
    """Number of leading zero bits in a 64-bit value."""
    return 64 - (n & 0xFFFFFFFFFFFFFFFF).bit_length()


def get_size_in_bits(n):
    """Number of bits needed to represent an unsigned 32-bit value."""
    return 32 - count_leading_zeros32(n)


def norm_w32(a):
    """Left shifts that normalise a signed 32-bit value; 0 for 0."""
    if a == 0:
        return 0
    return count_leading_zeros32(~a if a < 0 else a) - 1


def norm_u32(a):
    """Left shifts that normalise an unsigned 32-bit value; 0 for 0."""
    if a == 0:
        return 0
    return count_leading_zeros32(a)


def norm_w16(a):
    """Left shifts that normalise a signed 16-bit value; 0 for 0."""
    if a == 0:
        return 0
    return count_leading_zeros32(~a if a < 0 else a) - 17


def mul_accum_w16(a, b, c):
    """Return a * b + c in 32-bit arithmetic."""
    return wrap_int32(a * b + c)