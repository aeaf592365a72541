"""Tests for candidate sources"""

import asyncio
from unittest.mock import patch

import pytest

from namehint.exceptions import ConfigError
from namehint.protocols import CandidateSource
from namehint.sources import (
    DirectoryModules,
    ModuleExports,
    ObjectMembers,
    StaticCandidates,
)


class TestStaticCandidates:
    """Test StaticCandidates source."""

    @pytest.mark.asyncio
    async def test_returns_names(self):
        """Test the given names come back in order"""
        source = StaticCandidates(["b", "a", "b"])
        assert await source.get_candidates() == ["b", "a", "b"]
        assert source.description == "candidates"

    @pytest.mark.asyncio
    async def test_returns_copy(self):
        """Test callers cannot mutate the pool"""
        source = StaticCandidates(["a"])
        names = await source.get_candidates()
        names.append("b")
        assert await source.get_candidates() == ["a"]

    def test_satisfies_protocol(self):
        """Test every source matches the CandidateSource protocol"""
        source: CandidateSource = StaticCandidates([], description="fields")
        assert source.description == "fields"


class TestObjectMembers:
    """Test ObjectMembers source."""

    @pytest.mark.asyncio
    async def test_type_members(self):
        """Test members of a type"""
        source = ObjectMembers(list)
        assert "append" in await source.get_candidates()
        assert source.description == "list"

    @pytest.mark.asyncio
    async def test_instance_members(self):
        """Test members of an instance are described by its type"""

        class Counter:
            def __init__(self):
                self.count = 0

            def increment(self):
                self.count += 1

        source = ObjectMembers(Counter())
        candidates = await source.get_candidates()
        assert "count" in candidates
        assert "increment" in candidates
        assert source.description == "Counter"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "type_name,expected", [("str", "str"), ("list[int]", "list"), (" Dict ", "dict")]
    )
    async def test_for_type_name(self, type_name, expected):
        """Test builtin type names, including subscripted forms"""
        source = ObjectMembers.for_type_name(type_name)
        assert source.description == expected
        assert await source.get_candidates()

    def test_unknown_type_name(self):
        """Test unknown names raise ConfigError with suggestions"""
        with pytest.raises(ConfigError) as exc_info:
            ObjectMembers.for_type_name("strr")

        error = exc_info.value
        assert "strr" in error.message
        assert error.suggestions[0] == "Try 'str' instead"
        assert "str" in error.context["known_types"]


class TestModuleExports:
    """Test ModuleExports source."""

    @pytest.mark.asyncio
    async def test_module_with_all(self):
        """Test __all__ is used when defined"""
        candidates = await ModuleExports("json").get_candidates()
        assert "dumps" in candidates
        assert "JSONDecodeError" in candidates
        assert "decoder" not in candidates

    @pytest.mark.asyncio
    async def test_module_without_all(self):
        """Test dir() is used when __all__ is missing"""
        candidates = await ModuleExports("namehint.consts").get_candidates()
        assert "MIN_SIMILARITY_SCORE" in candidates
        assert "__name__" not in candidates

    @pytest.mark.asyncio
    async def test_has_name(self):
        """Test any module attribute is importable"""
        source = ModuleExports("json")
        assert await source.has_name("decoder")
        assert not await source.has_name("dumpz")

    @pytest.mark.asyncio
    async def test_missing_module(self):
        """Test an unknown module raises ConfigError with suggestions"""
        with pytest.raises(ConfigError) as exc_info:
            await ModuleExports("jsonn").get_candidates()

        error = exc_info.value
        assert error.message == "Cannot import module 'jsonn'"
        assert "Try 'json' instead" in error.suggestions
        assert error.context == {"module_name": "jsonn"}

    @pytest.mark.asyncio
    async def test_missing_submodule(self):
        """Test submodule suggestions come from the parent package"""
        with pytest.raises(ConfigError) as exc_info:
            await ModuleExports("namehint.scorng").get_candidates()

        assert "Try 'namehint.scoring' instead" in exc_info.value.suggestions

    @pytest.mark.asyncio
    async def test_import_runs_in_worker_thread(self):
        """Test importing and the sibling scan are offloaded from the event loop"""
        offloaded = []
        to_thread = asyncio.to_thread

        async def record(func, *args):
            offloaded.append(func.__name__)
            return await to_thread(func, *args)

        with patch("namehint.sources.asyncio.to_thread", side_effect=record):
            assert await ModuleExports("json").has_name("dumps")
            with pytest.raises(ConfigError):
                await ModuleExports("jsonn").get_candidates()

        assert offloaded == [
            "import_module",
            "import_module",
            "_sibling_module_names",
        ]


class TestDirectoryModules:
    """Test DirectoryModules source."""

    @pytest.mark.asyncio
    async def test_lists_modules(self, module_tree):
        """Test modules, stubs and packages are listed; other files are not"""
        candidates = await DirectoryModules(module_tree).get_candidates()
        assert candidates == ["config", "main", "utils"]

    @pytest.mark.asyncio
    async def test_package_contents(self, module_tree):
        """Test __init__ is not a module name"""
        candidates = await DirectoryModules(module_tree / "utils").get_candidates()
        assert candidates == ["formatting", "helpers"]

    @pytest.mark.asyncio
    async def test_deduplicates_and_strips_extension_tags(self, tmp_path):
        """Test one name per module across extensions"""
        (tmp_path / "a.py").write_text("")
        (tmp_path / "a.pyi").write_text("")
        (tmp_path / "b.pyx").write_text("")
        (tmp_path / "ext.cpython-312-x86_64-linux-gnu.so").write_text("")
        (tmp_path / "pkg").mkdir()
        (tmp_path / ".hidden").mkdir()
        (tmp_path / "README.md").write_text("")

        candidates = await DirectoryModules(tmp_path).get_candidates()
        assert candidates == ["a", "b", "ext", "pkg"]

    @pytest.mark.asyncio
    async def test_dotted_file_names_are_not_modules(self, tmp_path):
        """Test only extension modules drop extra dotted parts"""
        (tmp_path / "foo.bar.py").write_text("")
        (tmp_path / "native.cp312-win_amd64.pyd").write_text("")
        (tmp_path / "plain.py").write_text("")

        candidates = await DirectoryModules(tmp_path).get_candidates()
        assert candidates == ["native", "plain"]

    @pytest.mark.asyncio
    async def test_missing_directory(self, tmp_path):
        """Test a missing directory raises ConfigError"""
        missing = tmp_path / "nope"
        with pytest.raises(ConfigError) as exc_info:
            await DirectoryModules(missing).get_candidates()

        assert exc_info.value.context == {"directory": str(missing)}

    @pytest.mark.asyncio
    async def test_file_is_not_a_directory(self, module_tree):
        """Test a file path raises ConfigError"""
        with pytest.raises(ConfigError):
            await DirectoryModules(module_tree / "main.py").get_candidates()
