"""Tests for the command-line entry point."""

import orjson

from genome.cli import main


class TestSample:
    def test_prints_grid(self, capsys):
        code = main(["sample", "--world-seed", "42", "--base-genome", "AAAA", "--grid", "2"])
        assert code == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 2
        for line in lines:
            genomes = line.split()
            assert len(genomes) == 2
            assert all(len(g) == 4 for g in genomes)

    def test_deterministic(self, capsys):
        args = ["sample", "--world-seed", "meadow", "--base-genome", "ABCD", "--grid", "3"]
        main(args)
        first = capsys.readouterr().out
        main(args)
        assert capsys.readouterr().out == first

    def test_species_file(self, tmp_path, capsys):
        path = tmp_path / "species.json"
        path.write_bytes(
            orjson.dumps({"name": "s", "base_genome": "XYZ", "mutator": {"vocabulary": "XYZ"}})
        )
        assert main(["--species", str(path), "sample", "--grid", "1"]) == 0
        assert len(capsys.readouterr().out.strip()) == 3

    def test_bad_configuration(self, capsys):
        assert main(["sample", "--diversity-magnitude", "-1"]) == 2


class TestCross:
    def test_cross(self, capsys):
        code = main(["cross", "AABB", "CCDD", "--mutation-chance", "0", "--count", "5"])
        assert code == 0
        for child in capsys.readouterr().out.split():
            assert all(symbol in pair for symbol, pair in zip(child, ["AC", "AC", "BD", "BD"]))

    def test_seeded_cross_is_reproducible(self, capsys):
        args = ["cross", "ABCD", "DCBA", "--seed", "9", "--count", "4", "--mutation-chance", "0.5"]
        main(args)
        first = capsys.readouterr().out
        main(args)
        assert capsys.readouterr().out == first

    def test_incompatible(self, capsys):
        assert main(["cross", "AA", "AAA"]) == 1
        assert capsys.readouterr().out == ""


class TestLogging:
    def test_unknown_log_level(self, capsys):
        assert main(["--log-level", "bogus", "sample", "--grid", "1"]) == 2

    def test_unknown_breed_log_level(self, capsys):
        assert main(["--breed-log-level", "bogus", "sample", "--grid", "1"]) == 2
