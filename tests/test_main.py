"""Tests for main.py"""

import json
import logging
import sys

import pytest

import main
from labeling import is_valid_labeling
from utils.grid import random_binary_grid


class TestRunLabeling:
    def test_logs_each_iteration(self, caplog):
        grid = [[1, 0, 1], [1, 0, 1], [1, 1, 1]]
        with caplog.at_level(logging.INFO):
            labels = main.run_labeling(grid, show_visuals=False)
        assert labels == [[2, 0, 2], [2, 0, 2], [2, 2, 2]]
        messages = [record.getMessage() for record in caplog.records]
        assert messages.count("keys length : 1") == 2
        assert "keys length : 2" in messages
        assert "END" in messages

    def test_equivalences_logged_once_per_iteration(self, caplog):
        grid = [[1, 0, 1], [1, 0, 1], [1, 1, 1]]
        with caplog.at_level(logging.DEBUG):
            main.run_labeling(grid, show_visuals=False)
        messages = [record.getMessage() for record in caplog.records]
        assert [m for m in messages if "{3: 1, 4: 2}" in m] == [
            "Iteration 1: 2 equivalences {3: 1, 4: 2}"
        ]
        assert [m for m in messages if "{5: 1}" in m] == [
            "Iteration 2: 1 equivalences {5: 1}"
        ]

    def test_visuals(self, capsys):
        main.run_labeling([[1, 1], [1, 1]])
        out = capsys.readouterr().out
        assert "Preliminary labels" in out
        assert "END" in out

    def test_random_grid(self):
        grid = random_binary_grid(20, seed=7)
        assert is_valid_labeling(grid, main.run_labeling(grid, show_visuals=False))


class TestMain:
    def test_grid_file(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "grid.json"
        path.write_text(json.dumps([[1, 0], [1, 1]]))
        monkeypatch.setattr(
            sys,
            "argv",
            ["main.py", "--grid", str(path), "--delay", "0", "--no-visuals"],
        )
        main.main()
        assert capsys.readouterr().out == ""

    def test_random_orthogonal(self, monkeypatch):
        monkeypatch.setattr(
            sys,
            "argv",
            [
                "main.py",
                "--size",
                "8",
                "--seed",
                "2",
                "--delay",
                "0",
                "--orthogonal",
                "--no-visuals",
            ],
        )
        main.main()

    def test_invalid_grid_file(self, tmp_path, monkeypatch):
        path = tmp_path / "grid.json"
        path.write_text(json.dumps([[1, 4]]))
        monkeypatch.setattr(sys, "argv", ["main.py", "--grid", str(path)])
        with pytest.raises(ValueError):
            main.main()
