import numpy as np
import pytest

import gpreg as gp
from gpreg.boundary import MatrixBuffer, gr, sample_from_gr, get_std_gprocess


@pytest.fixture
def buffers():
    x = MatrixBuffer(np.array([0.0, 1.0, 2.0]), 3, 1)
    y = MatrixBuffer(np.array([0.0, 1.0, 2.0]), 3, 1)
    xt = MatrixBuffer(np.array([0.5, 1.0, 1.5, 4.0]), 4, 1)
    return x, y, xt


def test_matrix_buffer_row_major():
    a = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    buf = MatrixBuffer.from_array(a)
    assert (buf.rows, buf.cols) == (2, 3)
    assert np.array_equal(buf.data, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    assert np.array_equal(buf.to_array(), a)


def test_matrix_buffer_vector_is_column():
    buf = MatrixBuffer.from_array(np.array([1.0, 2.0]))
    assert (buf.rows, buf.cols) == (2, 1)


def test_matrix_buffer_length_contract():
    with pytest.raises(AssertionError):
        MatrixBuffer(np.zeros(5), 2, 3).to_array()


def test_matrix_buffer_to_array_copies():
    data = np.array([1.0, 2.0])
    a = MatrixBuffer(data, 2, 1).to_array()
    a[0, 0] = 9.0
    assert data[0] == 1.0


def test_gr_matches_model(buffers):
    x, y, xt = buffers
    out = gr(x, y, xt, v=1.0, l=1.0, s=0.1)
    assert (out.mean.rows, out.mean.cols) == (4, 1)
    assert (out.covariance.rows, out.covariance.cols) == (4, 4)
    assert (out.variance.rows, out.variance.cols) == (4, 1)

    model = gp.GPModel(x.to_array(), y.to_array(), 1.0, 1.0, 0.1)
    res = model.predict(xt.to_array())
    assert np.array_equal(out.mean.data, res.mean)
    assert np.array_equal(out.covariance.to_array(), res.covariance)
    assert np.array_equal(out.variance.data, np.diag(out.covariance.to_array()))


def test_gr_defaults(buffers):
    x, y, xt = buffers
    out = gr(x, y, xt)
    model = gp.GPModel(x.to_array(), y.to_array(), 1.0, 1.0, 0.0, None)
    assert np.array_equal(out.mean.data, model.predict(xt.to_array()).mean)


def test_gr_accepts_tuples():
    out = gr(([0.0, 1.0], 2, 1), ([1.0, 3.0], 2, 1), ([0.5], 1, 1), s=0.2, m=0.0)
    assert out.mean.rows == 1
    assert np.isfinite(out.mean.data[0])


def test_gr_empty_query(buffers):
    x, y, _ = buffers
    out = gr(x, y, MatrixBuffer(np.zeros(0), 0, 1))
    assert (out.mean.rows, out.covariance.rows, out.covariance.cols) == (0, 0, 0)


def test_gr_errors_propagate(buffers):
    x, _, xt = buffers
    with pytest.raises(gp.DimensionError):
        gr(x, MatrixBuffer(np.zeros(2), 2, 1), xt)
    with pytest.raises(gp.HyperparameterError):
        gr(x, x, xt, v=0.0)
    with pytest.raises(gp.DimensionError):
        gr(x, x, MatrixBuffer(np.zeros(4), 2, 2))


def test_sample_from_gr(buffers):
    x, y, xt = buffers
    out = sample_from_gr(5, x, y, xt, s=0.1, rng=np.random.default_rng(0))
    assert (out.rows, out.cols) == (4, 5)
    assert out.data.shape == (20,)


def test_get_std_gprocess():
    out = get_std_gprocess(2, 100, rng=np.random.default_rng(0))
    assert (out.rows, out.cols) == (101, 2)
