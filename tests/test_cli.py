import os

import pytest

from fie import __version__
from fie.cli import MISSING_PATH_MESSAGE, main
from fie.lister import EMPTY_MESSAGE


@pytest.fixture
def listing_dir(tmp_path):
    (tmp_path / 'b.txt').write_text('b')
    (tmp_path / 'a').mkdir()
    (tmp_path / 'C.md').write_text('C' * 2000)
    return tmp_path


def names(output):
    return [line.split()[-1] for line in output.splitlines()[1:]]


def test_lists_directory(listing_dir, capsys):
    assert main([str(listing_dir), '--color', 'never']) == 0
    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert lines[0] == 'Permissions Size   Last Modified      Name'
    assert names(captured.out) == ['C.md', 'a', 'b.txt']
    assert lines[1].startswith('.') and '2K' in lines[1]
    assert lines[2].startswith('d')
    assert captured.err == ''


def test_defaults_to_current_directory(listing_dir, capsys, monkeypatch):
    monkeypatch.chdir(listing_dir)
    assert main(['--color', 'never']) == 0
    assert names(capsys.readouterr().out) == ['C.md', 'a', 'b.txt']


def test_empty_directory(tmp_path, capsys):
    assert main([str(tmp_path), '--color', 'never']) == 0
    captured = capsys.readouterr()
    assert captured.out == f'{EMPTY_MESSAGE}\n'
    assert captured.err == ''


def test_missing_path(tmp_path, capsys):
    assert main([str(tmp_path / 'missing'), '--color', 'never']) == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err == f'{MISSING_PATH_MESSAGE}\n'


def test_not_a_directory(listing_dir, capsys):
    assert main([str(listing_dir / 'b.txt'), '--color', 'never']) == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'not a directory' in captured.err


@pytest.mark.skipif(not hasattr(os, 'symlink'), reason='symlinks not supported')
def test_links_flag(listing_dir, capsys):
    os.symlink('a', listing_dir / 'link')
    assert main([str(listing_dir), '--color', 'never']) == 0
    assert capsys.readouterr().out.splitlines()[-1].endswith('  link')
    assert main([str(listing_dir), '--color', 'never', '--links']) == 0
    line = capsys.readouterr().out.splitlines()[-1]
    assert line.startswith('l')
    assert line.endswith('  link -> a')


@pytest.mark.skipif(not hasattr(os, 'symlink'), reason='symlinks not supported')
def test_config_file(listing_dir, tmp_path_factory, capsys):
    os.symlink('a', listing_dir / 'link')
    config_path = tmp_path_factory.mktemp('config') / 'fie.yaml'
    config_path.write_text('show_link_targets: true\ncolor: never\n')
    assert main(['--config_path', str(config_path), str(listing_dir)]) == 0
    assert capsys.readouterr().out.splitlines()[-1].endswith('  link -> a')


def test_invalid_config_exits(tmp_path, capsys):
    config_path = tmp_path / 'fie.yaml'
    config_path.write_text('colour: never\n')
    with pytest.raises(SystemExit) as exc_info:
        main(['--config_path', str(config_path), str(tmp_path)])
    assert exc_info.value.code == 2
    assert 'unknown configuration fields: colour' in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(['--version'])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out == f'fie {__version__}\n'


def test_numeric_log_level_in_config_exits(tmp_path, capsys):
    config_path = tmp_path / 'fie.yaml'
    config_path.write_text('log_level: 10\n')
    with pytest.raises(SystemExit) as exc_info:
        main(['--config_path', str(config_path), str(tmp_path)])
    assert exc_info.value.code == 2
    assert "invalid log level: '10'" in capsys.readouterr().err
