#!/usr/bin/env python3
"""
输入文件打开函数测试
"""

import io
import sys
import pytest

from qualcount.utils.misc import open_fastq_input, FileOpenError


class TestOpenFastqInput:
    """测试输入选择"""

    def test_open_path(self, tmp_path):
        """测试打开文件"""
        path = tmp_path / "reads.fastq"
        path.write_bytes(b"@r\nA\n+\nI\n")
        handle, should_close = open_fastq_input(str(path))
        try:
            assert should_close is True
            assert handle.readline() == b"@r\n"
        finally:
            handle.close()

    @pytest.mark.parametrize("file_path", [None, "-"])
    def test_stdin(self, monkeypatch, file_path):
        """测试标准输入"""
        buffer = io.BytesIO(b"@r\n")
        monkeypatch.setattr(sys, 'stdin', io.TextIOWrapper(buffer))
        handle, should_close = open_fastq_input(file_path)
        assert handle is buffer
        assert should_close is False

    def test_missing_raises(self, tmp_path):
        """测试文件不存在时报错"""
        missing = str(tmp_path / "missing.fastq")
        with pytest.raises(FileOpenError) as exc_info:
            open_fastq_input(missing)
        assert exc_info.value.filename == missing
        assert isinstance(exc_info.value, OSError)

    def test_missing_falls_back_with_warning(self, tmp_path, monkeypatch, caplog):
        """测试回退到标准输入并给出警告"""
        buffer = io.BytesIO(b"")
        monkeypatch.setattr(sys, 'stdin', io.TextIOWrapper(buffer))
        handle, should_close = open_fastq_input(str(tmp_path / "missing.fastq"), missing_input="stdin")
        assert handle is buffer
        assert should_close is False
        assert "Cannot open" in caplog.text


if __name__ == "__main__":
    pytest.main([__file__])
