# splkit

Fixed-point signal processing building blocks that reproduce 16- and 32-bit
integer arithmetic exactly, including wrap-around and saturation. Every
function works on plain Python integers and lists and returns new values
rather than writing into buffers you pass in. The only objects that keep
state between calls are the filter-state lists of `splkit.resample_by2`
(updated in place) and the resampler classes of `splkit.resample_48khz`.

There are no third-party dependencies.

## Installation

```
pip install splkit
```

For running the tests:

```
pip install "splkit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `splkit.fixed` | wrapping and saturating helpers (`wrap_int16`, `wrap_int32`, `wrap_uint32`, `sat_w32_to_w16`, `add_sat_w16`, `sub_sat_w16`, `add_sat_w32`, `sub_sat_w32`), leading-zero counts (`count_leading_zeros32`, `count_leading_zeros64` and their table-lookup variants), `norm_w32`, `norm_u32`, `norm_w16`, `get_size_in_bits`, `mul_accum_w16` |
| `splkit.division` | guarded integer divisions (`div_u32_u16`, `div_w32_w16`, `div_w32_w16_res_w16`) and Q31 division (`div_result_in_q31`, `div_w32_hi_low`) |
| `splkit.fixed_sqrt` | integer square root by a Taylor series (`sqrt`, and its Q31 core `sqrt_local`) |
| `splkit.min_max` | maxima, minima, maximum absolute values and their indexes over 16- and 32-bit vectors |
| `splkit.vectors` | bit shifts, gain scaling and scaled addition of vectors |
| `splkit.energy` | `energy` and `get_scaling_square` |
| `splkit.correlation` | `dot_product_with_scale` and `cross_correlation` |
| `splkit.downsample` | `downsample_fast`, an FIR decimator with Q12 coefficients |
| `splkit.bit_reverse` | `complex_bit_reverse` for interleaved complex data |
| `splkit.fft_tables` | `SIN_TABLE_1024`, a Q15 sine table with 1024 points per period |
| `splkit.fft` | radix-2 `complex_fft` and `complex_ifft` in fixed point |
| `splkit.resample_by2` | all-pass half-band filters for up/down sampling by two and low-passing |
| `splkit.resample_fractional` | 48→32, 32→24 and 44→32 kHz block resamplers |
| `splkit.resample_48khz` | stateful `Resampler48To16`, `Resampler16To48`, `Resampler48To8`, `Resampler8To48` |

Functions that need a non-empty vector, matching lengths or enough input
samples raise `ValueError` instead of returning an error code. The guarded
divisions are the exception: a zero denominator gives a fixed result
(`0xFFFFFFFF`, `0x7FFFFFFF` or `0x7FFF`), not an error.

## Examples

Saturating arithmetic and normalisation:

```python
from splkit.fixed import add_sat_w16, norm_w32

add_sat_w16(30000, 10000)   # 32767
norm_w32(1)                 # 30
```

Integer square root:

```python
from splkit.fixed_sqrt import sqrt

sqrt(73632)                 # 271
```

Energy with automatic scaling; the second value is the number of left
shifts that bring the energy back to the plain sum of squares:

```python
from splkit.energy import energy

value, scale = energy([100, -200, 300])
```

FFT on bit-reversed, interleaved `[re, im, re, im, ...]` data. The forward
transform divides by the number of points; the inverse returns the values
and a scale telling how many left shifts restore them:

```python
from splkit.bit_reverse import complex_bit_reverse
from splkit.fft import complex_fft, complex_ifft

data = complex_bit_reverse(samples, 7)        # 128 complex values
spectrum = complex_fft(data, 7, 1)            # mode 1: rounded, more accurate
restored, scale = complex_ifft(complex_bit_reverse(spectrum, 7), 7, 1)
```

Converting 10 ms frames from 48 kHz to 16 kHz, keeping filter state between
frames:

```python
from splkit.resample_48khz import Resampler48To16

resampler = Resampler48To16()
out = resampler.process([0] * 480)   # 160 samples
resampler.reset()                    # clear the filter state
```

Each resampler expects a fixed frame length (480 samples at 48 kHz, 160 at
16 kHz, 80 at 8 kHz), exposed as `input_length` and `output_length`, and
raises `ValueError` for anything else.

## What it does not do

splkit is a library of arithmetic and filtering primitives only. It has no
command-line tool, does not read or write audio files, has no voice activity
detector, and offers no real-valued FFT, autocorrelation, LPC or
other-rate (22 kHz) resamplers. Everything runs in pure Python, so it is
meant for exact reproduction of fixed-point results, not for speed.