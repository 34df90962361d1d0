# =============================================================================
# test_assembler.py - Full Assembler Integration Tests
# =============================================================================
# End-to-end tests for the complete pipeline from raw source lines to
# binary words, plus the file helpers on the Assembler class.
# =============================================================================

import pytest

from hack_asm import Assembler, assemble, assemble_file
from hack_asm.errors import MnemonicError, SourceLocation


# =============================================================================
# Full Assembly Pipeline Tests
# =============================================================================

class TestFullPipeline:
    """Source to binary words."""

    def test_max_program(self, max_source, max_words):
        assert Assembler().assemble_string(max_source) == max_words

    def test_add_program(self):
        source = ["@2", "D=A", "@3", "D=D+A", "@0", "M=D"]
        assert assemble(source) == [
            "0000000000000010",
            "1110110000010000",
            "0000000000000011",
            "1110000010010000",
            "0000000000000000",
            "1110001100001000",
        ]

    def test_comments_only_program(self):
        assert assemble(["// nothing here", "", "   "]) == []

    def test_every_word_is_16_bits(self, max_source):
        for word in Assembler().assemble_string(max_source):
            assert len(word) == 16
            assert set(word) <= {"0", "1"}


# =============================================================================
# Symbol Resolution Tests
# =============================================================================

class TestSymbolResolution:
    """Labels and variables across both passes."""

    def test_backward_reference(self):
        words = assemble(["@0", "(LOOP)", "D=A", "@LOOP", "0;JMP"])
        assert words[2] == "0000000000000001"

    def test_forward_reference(self):
        """A label used before its declaration is not mistaken for a variable."""
        asm = Assembler()
        words = asm.assemble(["@LOOP", "0;JMP", "(LOOP)"])
        assert words[0] == "0000000000000010"
        assert asm.get_symbols() == {"LOOP": 2}

    def test_forward_reference_to_single_instruction(self):
        words = assemble(["@END", "(END)", "0;JMP"])
        assert words[0] == "0000000000000001"

    def test_variables_in_first_seen_order(self):
        words = assemble(["@x", "@y", "@x"])
        assert words == [
            "0000000000010000",
            "0000000000010001",
            "0000000000010000",
        ]

    def test_labels_do_not_consume_variable_slots(self):
        asm = Assembler()
        asm.assemble(["@i", "(LOOP)", "@LOOP", "@j", "@i"])
        assert asm.get_symbols() == {"LOOP": 1, "i": 16, "j": 17}

    def test_predefined_independent_of_program(self):
        words = assemble(["@a", "@b", "@SP", "@THAT", "@R15"])
        assert words[2:] == [
            "0000000000000000",
            "0000000000000100",
            "0000000000001111",
        ]

    def test_runs_are_independent(self):
        asm = Assembler()
        asm.assemble(["@first"])
        asm.assemble(["@second"])
        assert asm.get_symbols() == {"second": 16}


# =============================================================================
# Error Handling Tests
# =============================================================================

class TestErrorHandling:
    """Malformed instructions abort the run."""

    def test_malformed_mnemonic_raises(self):
        with pytest.raises(MnemonicError):
            assemble(["@1", "D=X"])

    def test_error_points_at_source_line(self):
        source = ["// header", "@1", "(L)", "", "D=X"]
        with pytest.raises(MnemonicError) as exc_info:
            assemble(source, filename="bad.asm")
        assert exc_info.value.location == SourceLocation("bad.asm", 5)
        assert exc_info.value.address == 1

    def test_failed_run_clears_previous_program(self, tmp_path):
        """A failed run leaves nothing from the earlier run to write out."""
        asm = Assembler()
        asm.assemble(["@first", "@1"])
        with pytest.raises(MnemonicError):
            asm.assemble(["@2", "Q"])
        assert asm.get_words() == []
        assert asm.get_symbols() == {}

        out = tmp_path / "out.hack"
        asm.write_hack(out)
        assert out.read_text() == ""


# =============================================================================
# File I/O Tests
# =============================================================================

class TestFileOutput:
    """assemble_file, write_hack and write_symbols."""

    def test_assemble_file(self, tmp_path, max_source, max_words):
        source = tmp_path / "Max.asm"
        source.write_text(max_source)
        assert assemble_file(source) == max_words

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Assembler().assemble_file(tmp_path / "missing.asm")

    def test_file_errors_name_the_file(self, tmp_path):
        source = tmp_path / "Bad.asm"
        source.write_text("@1\nD=X\n")
        with pytest.raises(MnemonicError) as exc_info:
            assemble_file(source)
        assert exc_info.value.location == SourceLocation(str(source), 2)

    def test_write_hack(self, tmp_path, max_source, max_words):
        asm = Assembler()
        asm.assemble_string(max_source)
        out = tmp_path / "Max.hack"
        asm.write_hack(out)
        assert out.read_text().splitlines() == max_words

    def test_write_hack_overwrites(self, tmp_path):
        out = tmp_path / "out.hack"
        out.write_text("stale\n")
        asm = Assembler()
        asm.assemble(["@5"])
        asm.write_hack(out)
        assert out.read_text() == "0000000000000101\n"

    def test_write_symbols(self, tmp_path):
        asm = Assembler()
        asm.assemble(["@i", "(LOOP)", "@LOOP", "0;JMP", "@j", "(END)"])
        out = tmp_path / "prog.sym"
        asm.write_symbols(out)
        assert out.read_text() == "LOOP 1\nEND 4\ni 16\nj 17\n"
