"""Polyphase all-pass filters for halving, doubling and low-passing a signal.

Each function takes the input samples and a mutable filter state. The state
is updated in place, so consecutive blocks of one stream can be processed
with the same state list. Values marked "int" are 32-bit samples shifted
left by 15 bits plus an offset of 16384; "short" values are plain 16-bit
samples.
"""

from splkit.fixed import sat_w32_to_w16, wrap_int32

# All-pass coefficients of the two polyphase branches.
_UPPER = (821, 6110, 12382)
_LOWER = (3050, 9368, 15063)

_STATE_LENGTH = 8
_LP_STATE_LENGTH = 16


def _check_state(state, length):
    if len(state) < length:
        raise ValueError(f"filter state must hold at least {length} values")


def _short_to_q15(sample):
    return wrap_int32((sample << 15) + (1 << 14))


def _truncate14(value):
    value >>= 14
    return value + 1 if value < 0 else value


def _allpass(state, base, coefs, sample):
    """Run one sample through a three-section all-pass chain; return its output."""
    diff = wrap_int32(sample - state[base + 1])
    diff = wrap_int32(diff + (1 << 13)) >> 14
    tmp1 = wrap_int32(state[base] + diff * coefs[0])
    state[base] = sample

    diff = _truncate14(wrap_int32(tmp1 - state[base + 2]))
    tmp0 = wrap_int32(state[base + 1] + diff * coefs[1])
    state[base + 1] = tmp1

    diff = _truncate14(wrap_int32(tmp0 - state[base + 3]))
    state[base + 3] = wrap_int32(state[base + 2] + diff * coefs[2])
    state[base + 2] = tmp0
    return state[base + 3]


def down_by2_int_to_short(data, state):
    """Decimate int samples by two into saturated 16-bit samples.

    Returns len(data) // 2 values; state needs 8 entries.
    """
    _check_state(state, _STATE_LENGTH)
    half = len(data) >> 1
    even = [_allpass(state, 0, _LOWER, data[2 * i]) >> 1 for i in range(half)]
    odd = [_allpass(state, 4, _UPPER, data[2 * i + 1]) >> 1 for i in range(half)]
    return [sat_w32_to_w16(wrap_int32(a + b) >> 15) for a, b in zip(even, odd)]


def down_by2_short_to_int(data, state):
    """Decimate 16-bit samples by two into int samples.

    Returns len(data) // 2 values; state needs 8 entries.
    """
    _check_state(state, _STATE_LENGTH)
    half = len(data) >> 1
    out = [
        _allpass(state, 0, _LOWER, _short_to_q15(data[2 * i])) >> 1
        for i in range(half)
    ]
    for i in range(half):
        upper = _allpass(state, 4, _UPPER, _short_to_q15(data[2 * i + 1])) >> 1
        out[i] = wrap_int32(out[i] + upper)
    return out


def _interpolate(data, state, convert_in, convert_out):
    _check_state(state, _STATE_LENGTH)
    samples = [convert_in(x) for x in data]
    out = [0] * (2 * len(samples))
    for i, x in enumerate(samples):
        out[2 * i] = convert_out(_allpass(state, 4, _UPPER, x))
    for i, x in enumerate(samples):
        out[2 * i + 1] = convert_out(_allpass(state, 0, _LOWER, x))
    return out


def up_by2_short_to_int(data, state):
    """Interpolate 16-bit samples by two into normalised, unsaturated values.

    Returns 2 * len(data) values; state needs 8 entries.
    """
    return _interpolate(data, state, _short_to_q15, lambda v: v >> 15)


def up_by2_int_to_int(data, state):
    """Interpolate int samples by two, keeping the int format.

    Returns 2 * len(data) values; state needs 8 entries.
    """
    return _interpolate(data, state, lambda v: v, lambda v: v)


def up_by2_int_to_short(data, state):
    """Interpolate int samples by two into saturated 16-bit samples.

    Returns 2 * len(data) values; state needs 8 entries.
    """
    return _interpolate(data, state, lambda v: v, lambda v: sat_w32_to_w16(v >> 15))


def _lowpass(data, state, convert_in):
    _check_state(state, _LP_STATE_LENGTH)
    half = len(data) >> 1
    even_in = [convert_in(data[2 * i]) for i in range(half)]
    odd_in = [convert_in(data[2 * i + 1]) for i in range(half)]
    out = [0] * (2 * half)

    # Odd input -> even output, delayed by one sample through state[12].
    pending = state[12]
    for i in range(half):
        out[2 * i] = _allpass(state, 0, _LOWER, pending) >> 1
        pending = odd_in[i]

    # Even input -> even output.
    for i, x in enumerate(even_in):
        upper = _allpass(state, 4, _UPPER, x) >> 1
        out[2 * i] = wrap_int32(out[2 * i] + upper) >> 15

    # Even input -> odd output.
    for i, x in enumerate(even_in):
        out[2 * i + 1] = _allpass(state, 8, _LOWER, x) >> 1

    # Odd input -> odd output.
    for i, x in enumerate(odd_in):
        upper = _allpass(state, 12, _UPPER, x) >> 1
        out[2 * i + 1] = wrap_int32(out[2 * i + 1] + upper) >> 15

    return out


def lp_by2_short_to_int(data, state):
    """Half-band low-pass of 16-bit samples into normalised, unsaturated values.

    Returns 2 * (len(data) // 2) values; state needs 16 entries.
    """
    return _lowpass(data, state, _short_to_q15)


def lp_by2_int_to_int(data, state):
    """Half-band low-pass of int samples into normalised, unsaturated values.

    Returns 2 * (len(data) // 2) values; state needs 16 entries.
    """
    return _lowpass(data, state, lambda v: v)