#!/usr/bin/env python3
"""
质量值解码函数测试
"""

import numpy as np
import pytest

from qualcount.utils.quality import (
    strip_terminator,
    quality_codes,
    decode_quality,
    count_high_quality,
    first_underflow,
)


class TestStripTerminator:
    """测试行尾去除"""

    def test_newline(self):
        """测试去除换行符"""
        assert strip_terminator("IIII\n") == "IIII"
        assert strip_terminator(b"IIII\n") == b"IIII"

    def test_crlf(self):
        """测试去除CRLF"""
        assert strip_terminator("II\r\n") == "II"
        assert strip_terminator(b"II\r\n") == b"II"

    def test_no_terminator(self):
        """测试没有换行符的最后一行"""
        assert strip_terminator("IIII") == "IIII"

    def test_legacy_always_drops_one(self):
        """测试legacy模式总是去掉一个字符"""
        assert strip_terminator("IIII\n", 'legacy') == "IIII"
        assert strip_terminator("IIII", 'legacy') == "III"
        assert strip_terminator(b"II\r\n", 'legacy') == b"II\r"

    def test_invalid_mode(self):
        """测试无效模式"""
        with pytest.raises(ValueError):
            strip_terminator("II\n", 'chomp')


class TestDecodeQuality:
    """测试Phred+33解码"""

    def test_decode(self):
        """测试基本解码"""
        assert decode_quality("!5I").tolist() == [0, 20, 40]
        assert decode_quality(b"!5I").tolist() == [0, 20, 40]

    def test_signed_scores(self):
        """测试低于偏移量的字符得到负分"""
        assert decode_quality(" \r").tolist() == [-1, -20]

    def test_custom_offset(self):
        """测试自定义偏移量"""
        assert decode_quality("@h", offset=64).tolist() == [0, 40]

    def test_codes_dtype(self):
        """测试返回int64数组"""
        codes = quality_codes("II")
        assert codes.dtype == np.int64
        assert codes.tolist() == [73, 73]

    def test_empty(self):
        """测试空字符串"""
        assert decode_quality("").size == 0
        assert decode_quality(b"").size == 0


class TestCountHighQuality:
    """测试高质量碱基计数"""

    def test_threshold(self):
        """测试阈值比较包含等号"""
        scores = np.array([0, 20, 30, 40])
        assert count_high_quality(scores, 30) == 2
        assert count_high_quality(scores, 0) == 4
        assert count_high_quality(scores, 41) == 0

    def test_wrap_counts_negative(self):
        """测试wrap策略"""
        scores = np.array([-1, 10])
        assert count_high_quality(scores, 30, 'wrap') == 1

    def test_wrap_counts_high_bytes(self):
        """测试wrap策略将128以上的字节计为高质量"""
        scores = decode_quality(b"\xc8I")
        assert count_high_quality(scores, 200, 'wrap') == 1
        assert count_high_quality(scores, 200, 'clamp') == 0
        assert count_high_quality(decode_quality("@h", offset=64), 200, 'wrap', offset=64) == 0

    def test_clamp(self):
        """测试clamp策略"""
        scores = np.array([-1, 10])
        assert count_high_quality(scores, 30, 'clamp') == 0
        assert count_high_quality(scores, 0, 'clamp') == 2

    def test_invalid_policy(self):
        """测试无效策略"""
        with pytest.raises(ValueError):
            count_high_quality(np.array([1]), 0, 'reject')

    def test_returns_int(self):
        """测试返回Python整数"""
        assert isinstance(count_high_quality(np.array([40]), 30), int)


class TestFirstUnderflow:
    """测试负分定位"""

    def test_first_underflow(self):
        assert first_underflow(np.array([40, -1, -2])) == 1
        assert first_underflow(np.array([40, 0])) == -1
        assert first_underflow(np.array([], dtype=np.int64)) == -1


if __name__ == "__main__":
    pytest.main([__file__])
