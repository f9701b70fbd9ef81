import numpy as np
import pandas as pd
import pytest

from tradesignals.series import PriceSeries


def test_coerces_to_float_tuple():
    s = PriceSeries([1, 2, 3])
    assert s.prices == (1.0, 2.0, 3.0)
    assert len(s) == 3
    assert s.last == 3.0


def test_keeps_order_and_duplicates():
    s = PriceSeries([3, 1, 1, 2])
    assert list(s) == [3.0, 1.0, 1.0, 2.0]


def test_empty_series_is_valid():
    s = PriceSeries()
    assert len(s) == 0
    assert s.as_array().shape == (0,)


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), -float("inf")])
def test_rejects_non_finite(bad):
    with pytest.raises(ValueError, match="Non-finite prices"):
        PriceSeries([100.0, bad])


def test_of_passes_through_existing_series():
    s = PriceSeries([1.0, 2.0])
    assert PriceSeries.of(s) is s
    assert PriceSeries.of([1.0, 2.0]) == s


def test_tail():
    s = PriceSeries([1, 2, 3, 4, 5])
    assert s.tail(2).prices == (4.0, 5.0)
    assert s.tail(10) is s
    assert len(s.tail(0)) == 0


def test_as_array_is_read_only():
    arr = PriceSeries([1.0, 2.0]).as_array()
    assert arr.dtype == np.float64
    with pytest.raises(ValueError):
        arr[0] = 5.0


def test_from_frame():
    df = pd.DataFrame({"close": [10, 11, 12], "open": [9, 10, 11]})
    assert PriceSeries.from_frame(df).prices == (10.0, 11.0, 12.0)
    assert PriceSeries.from_frame(df, src="open").prices == (9.0, 10.0, 11.0)


def test_from_frame_missing_column():
    df = pd.DataFrame({"open": [1, 2, 3]})
    with pytest.raises(ValueError, match="Source column"):
        PriceSeries.from_frame(df)


def test_immutable():
    s = PriceSeries([1.0])
    with pytest.raises(AttributeError):
        s.prices = (2.0,)
