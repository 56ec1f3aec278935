import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from utils.file_utils import (
    ensure_directory, get_all_files_by_suffix, is_hidden, read_file_content, write_file_atomic
)

def touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text('', encoding='utf-8')

def test_get_all_files_by_suffix(tmp_path):
    touch(tmp_path / 'b' / 'card.module.css')
    touch(tmp_path / 'a.module.css')
    touch(tmp_path / 'plain.css')
    touch(tmp_path / 'Upper.MODULE.CSS')
    touch(tmp_path / '.hidden' / 'x.module.css')
    touch(tmp_path / 'node_modules' / 'lib' / 'y.module.css')
    found = get_all_files_by_suffix(tmp_path, '.module.css')
    assert [p.relative_to(tmp_path).as_posix() for p in found] == [
        'Upper.MODULE.CSS', 'a.module.css', 'b/card.module.css'
    ]

def test_get_all_files_by_suffix_custom_exclusions(tmp_path):
    touch(tmp_path / 'node_modules' / 'y.module.css')
    touch(tmp_path / 'dist' / 'z.module.css')
    found = get_all_files_by_suffix(tmp_path, '.module.css', exclude_dirs=['dist'])
    assert [p.name for p in found] == ['y.module.css']

def test_is_hidden(tmp_path):
    assert is_hidden(tmp_path / '.git')
    assert not is_hidden(tmp_path / 'src')

def test_ensure_directory_is_idempotent(tmp_path):
    target = tmp_path / 'a' / 'b'
    ensure_directory(target)
    ensure_directory(target)
    assert target.is_dir()

def test_write_file_atomic(tmp_path):
    target = tmp_path / 'out.d.ts'
    write_file_atomic(target, 'first\n')
    write_file_atomic(target, 'second\n')
    assert read_file_content(target) == 'second\n'
    assert target.read_bytes() == b'second\n'
    assert [p.name for p in tmp_path.iterdir()] == ['out.d.ts']

def test_write_file_atomic_missing_directory(tmp_path):
    with pytest.raises(OSError):
        write_file_atomic(tmp_path / 'missing' / 'out.d.ts', 'x')

def test_read_file_content_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file_content(tmp_path / 'missing.css')
