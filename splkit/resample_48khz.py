"""Stateful resamplers between 48 kHz and 16 or 8 kHz, in 10 ms frames."""

from splkit.resample_by2 import (
    down_by2_int_to_short,
    down_by2_short_to_int,
    lp_by2_int_to_int,
    lp_by2_short_to_int,
    up_by2_int_to_int,
    up_by2_int_to_short,
    up_by2_short_to_int,
)
from splkit.resample_fractional import resample_32khz_to_24khz, resample_48khz_to_32khz

_HISTORY = 8


def _check_frame(samples, expected):
    if len(samples) != expected:
        raise ValueError(f"expected a frame of {expected} samples, got {len(samples)}")


class Resampler48To16:
    """Convert 480-sample 48 kHz frames into 160-sample 16 kHz frames."""

    input_length = 480
    output_length = 160

    def __init__(self):
        self.reset()

    def reset(self):
        """Clear the filter state."""
        self._s48_48 = [0] * 16
        self._s48_32 = [0] * _HISTORY
        self._s32_16 = [0] * _HISTORY

    def process(self, samples):
        """Resample one frame and return the output samples."""
        _check_frame(samples, self.input_length)
        filtered = lp_by2_short_to_int(samples, self._s48_48)
        buffer = self._s48_32 + filtered
        self._s48_32 = filtered[-_HISTORY:]
        mid = resample_48khz_to_32khz(buffer, 160)
        return down_by2_int_to_short(mid, self._s32_16)


class Resampler16To48:
    """Convert 160-sample 16 kHz frames into 480-sample 48 kHz frames."""

    input_length = 160
    output_length = 480

    def __init__(self):
        self.reset()

    def reset(self):
        """Clear the filter state."""
        self._s16_32 = [0] * _HISTORY
        self._s32_24 = [0] * _HISTORY
        self._s24_48 = [0] * _HISTORY

    def process(self, samples):
        """Resample one frame and return the output samples."""
        _check_frame(samples, self.input_length)
        upsampled = up_by2_short_to_int(samples, self._s16_32)
        buffer = self._s32_24 + upsampled
        self._s32_24 = upsampled[-_HISTORY:]
        mid = resample_32khz_to_24khz(buffer, 80)
        return up_by2_int_to_short(mid, self._s24_48)


class Resampler48To8:
    """Convert 480-sample 48 kHz frames into 80-sample 8 kHz frames."""

    input_length = 480
    output_length = 80

    def __init__(self):
        self.reset()

    def reset(self):
        """Clear the filter state."""
        self._s48_24 = [0] * _HISTORY
        self._s24_24 = [0] * 16
        self._s24_16 = [0] * _HISTORY
        self._s16_8 = [0] * _HISTORY

    def process(self, samples):
        """Resample one frame and return the output samples."""
        _check_frame(samples, self.input_length)
        halved = down_by2_short_to_int(samples, self._s48_24)
        filtered = lp_by2_int_to_int(halved, self._s24_24)
        buffer = self._s24_16 + filtered
        self._s24_16 = filtered[-_HISTORY:]
        mid = resample_48khz_to_32khz(buffer, 80)
        return down_by2_int_to_short(mid, self._s16_8)


class Resampler8To48:
    """Convert 80-sample 8 kHz frames into 480-sample 48 kHz frames."""

    input_length = 80
    output_length = 480

    def __init__(self):
        self.reset()

    def reset(self):
        """Clear the filter state."""
        self._s8_16 = [0] * _HISTORY
        self._s16_12 = [0] * _HISTORY
        self._s12_24 = [0] * _HISTORY
        self._s24_48 = [0] * _HISTORY

    def process(self, samples):
        """Resample one frame and return the output samples."""
        _check_frame(samples, self.input_length)
        upsampled = up_by2_short_to_int(samples, self._s8_16)
        buffer = self._s16_12 + upsampled
        self._s16_12 = upsampled[-_HISTORY:]
        mid = resample_32khz_to_24khz(buffer, 40)
        doubled = up_by2_int_to_int(mid, self._s12_24)
        return up_by2_int_to_short(doubled, self._s24_48)