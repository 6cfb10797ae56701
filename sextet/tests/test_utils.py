# Licensed under the GPLv3 - see LICENSE
import pytest
import numpy as np
from numpy.testing import assert_array_equal

from ..utils import byte_array, text_codes, encoded_length, decoded_length


class TestByteArray:
    @pytest.mark.parametrize('data', (b'Man', bytearray(b'Man'),
                                      memoryview(b'Man'), [77, 97, 110],
                                      (77, 97, 110),
                                      np.array([77, 97, 110], np.uint8)))
    def test_conversion(self, data):
        result = byte_array(data)
        assert result.dtype == np.uint8
        assert result.tobytes() == b'Man'

    def test_array_view(self):
        a = np.array([0x6e614d], '<u4')
        assert byte_array(a).tobytes() == b'Man\x00'
        assert byte_array(np.uint16(0x614d)).tobytes() == b'Ma'

    def test_empty(self):
        assert byte_array([]).size == 0
        assert byte_array(b'').size == 0

    def test_bad(self):
        with pytest.raises(TypeError):
            byte_array('Man')
        with pytest.raises(TypeError):
            byte_array([1.5, 2.])
        with pytest.raises(ValueError):
            byte_array([0, 256])
        with pytest.raises(ValueError):
            byte_array([-1])


class TestTextCodes:
    def test_ascii(self):
        codes = text_codes('TWFu')
        assert codes.dtype == np.uint8
        assert codes.tobytes() == b'TWFu'
        assert text_codes(b'TWFu').tobytes() == b'TWFu'

    def test_non_ascii(self):
        assert_array_equal(text_codes('T€'), [ord('T'), 0x20ac])

    def test_array(self):
        codes = np.array([[84, 87], [70, 117]])
        assert_array_equal(text_codes(codes), [84, 87, 70, 117])
        with pytest.raises(TypeError):
            text_codes(np.array([1.5]))

    def test_length(self):
        assert text_codes('TWFuTQ', 4).tobytes() == b'TWFu'
        assert text_codes('TWFu', 0).size == 0
        with pytest.raises(ValueError):
            text_codes('TWFu', 5)
        with pytest.raises(ValueError):
            text_codes('TWFu', -1)

    def test_bad_type(self):
        with pytest.raises(TypeError):
            text_codes(1234)
        with pytest.raises(TypeError):
            text_codes(['T', 'W', 'F', 'u'])


@pytest.mark.parametrize(('nbytes', 'nchars'),
                         ((0, 0), (1, 4), (2, 4), (3, 4), (4, 8), (5, 8),
                          (6, 8), (1000, 1336)))
def test_encoded_length(nbytes, nchars):
    assert encoded_length(nbytes) == nchars


def test_decoded_length():
    assert decoded_length(0) == 0
    assert decoded_length(4) == 3
    assert decoded_length(4, 2) == 1
    assert decoded_length(8, 1) == 5
    with pytest.raises(ValueError):
        decoded_length(5)
    with pytest.raises(ValueError):
        decoded_length(4, 3)
    with pytest.raises(ValueError):
        decoded_length(0, 1)
    with pytest.raises(ValueError):
        encoded_length(-1)
