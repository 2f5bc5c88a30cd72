"""Scaled dot products and sliding cross-correlation of 16-bit sequences."""

from splkit.fixed import INT32_MAX, INT32_MIN, wrap_int32


def dot_product_with_scale(vector1, vector2, scaling):
    """Sum of (a * b) >> scaling over both vectors, saturated to 32 bits."""
    if len(vector1) != len(vector2):
        raise ValueError("vectors must have the same length")
    total = sum((a * b) >> scaling for a, b in zip(vector1, vector2))
    return max(INT32_MIN, min(INT32_MAX, total))


def cross_correlation(seq1, seq2, dim_seq, dim_cross_correlation, right_shifts, step_seq2):
    """Correlate the first dim_seq values of seq1 with windows of seq2.

    Window k of seq2 starts at k * step_seq2. Every window must lie inside
    seq2, otherwise ValueError is raised. Each result wraps to 32 bits.
    """
    if dim_seq < 0 or dim_cross_correlation < 0:
        raise ValueError("dimensions must not be negative")
    if len(seq1) < dim_seq:
        raise ValueError("seq1 is shorter than dim_seq")
    starts = [k * step_seq2 for k in range(dim_cross_correlation)]
    if dim_seq and starts:
        if min(starts) < 0 or max(starts) + dim_seq > len(seq2):
            raise ValueError("correlation windows extend outside seq2")
    fixed = seq1[:dim_seq]
    return [
        wrap_int32(
            sum(
                (a * b) >> right_shifts
                for a, b in zip(fixed, seq2[start:start + dim_seq])
            )
        )
        for start in starts
    ]