""" Unit tests for the mapping file format and load/save behavior. """

import pytest

from aac_mappings.assoc import NullKeyError
from aac_mappings.io import MappingsFileIO, MappingsIOError, MappingsParser, MappingsTarget
from aac_mappings.mappings import AACMappings, AlreadySelectedError

from . import MAPPINGS_PATH, SCENARIO_PATH


class _RecordingTarget(MappingsTarget):
    """ Records everything the parser sends, in order. """

    def __init__(self) -> None:
        self.calls = []

    def declare_category(self, key:str, name:str) -> None:
        self.calls.append((key, name))

    def add_entry(self, key:str, image_loc:str, text:str) -> None:
        self.calls.append((key, image_loc, text))


def _snapshot(m:AACMappings) -> list:
    """ Return every category key, label, and image/text pair of <m> in order. Leaves the cursor at the top. """
    m.reset()
    result = []
    for key in m.list_locations():
        m.select(key)
        images = [(loc, m.select(loc)) for loc in m.list_locations()]
        result.append((key, m.get_category(), images))
        m.reset()
    return result


def _write(tmp_path, s:str) -> str:
    filename = str(tmp_path / "mappings.txt")
    with open(filename, 'w', encoding='utf-8') as fp:
        fp.write(s)
    return filename


def test_parse_permissive() -> None:
    """ Lines that don't fit the format are skipped without complaint. """
    text = ("\n"
            ">orphan entry before any category\n"
            "  one   fruit salad  \n"
            ">a apple pie\n"
            ">nospace\n"
            ">\n"
            "malformed\n"
            ">b banana\n"
            "\n"
            "two veg\n"
            ">c carrot\n")
    target = _RecordingTarget()
    MappingsParser().parse(text, target)
    assert target.calls == [
        # Outer whitespace is stripped, but only the first inner space splits the line.
        ("one", "  fruit salad"),
        ("one", "a", "apple pie"),
        # A malformed category line does not end the previous category.
        ("one", "b", "banana"),
        ("two", "veg"),
        ("two", "c", "carrot"),
    ]


def test_format() -> None:
    records = [("one", "fruit", [("a", "apple"), ("b", "banana split")]),
               ("two", "veg", [])]
    assert MappingsParser().format(records) == "one fruit\n>a apple\n>b banana split\ntwo veg\n"
    assert MappingsParser().format([]) == ""


def test_redeclared_category(tmp_path) -> None:
    """ Declaring a category again renames it but keeps its images and its place in line. """
    filename = _write(tmp_path, "one fruit\n>a apple\ntwo veg\n>c carrot\none produce\n>b banana\n")
    m = AACMappings(filename)
    assert _snapshot(m) == [("one", "produce", [("a", "apple"), ("b", "banana")]),
                            ("two", "veg", [("c", "carrot")])]


def test_duplicate_images(tmp_path) -> None:
    filename = _write(tmp_path, "one fruit\n>a apple\n>a avocado\n")
    m = AACMappings(filename)
    assert _snapshot(m) == [("one", "fruit", [("a", "avocado")])]


@pytest.mark.parametrize("path", [SCENARIO_PATH, MAPPINGS_PATH])
def test_round_trip(tmp_path, path) -> None:
    """ Saving a loaded file and loading the result gives back exactly the same board. """
    original = AACMappings(path)
    out_path = str(tmp_path / "saved.txt")
    assert original.save(out_path)
    reloaded = AACMappings(out_path)
    assert _snapshot(reloaded) == _snapshot(original)
    # A well-formed file is written back exactly as it was read.
    with open(path, encoding='utf-8') as fp:
        expected = fp.read()
    with open(out_path, encoding='utf-8') as fp:
        assert fp.read() == expected


def test_save_after_edits(tmp_path) -> None:
    """ Categories added at runtime have no display name, so their key is saved as the name. """
    m = AACMappings(SCENARIO_PATH)
    m.add_item("x", "")
    m.add_item("img1", "hello there")
    m.reset()
    m.select("one")
    m.add_item("c", "cherry")
    out_path = str(tmp_path / "saved.txt")
    assert m.save(out_path)
    with open(out_path, encoding='utf-8') as fp:
        assert fp.read() == ("one fruit\n>a apple\n>b banana\n>c cherry\n"
                             "two veg\n>c carrot\n"
                             "x x\n>img1 hello there\n")
    reloaded = AACMappings(out_path)
    assert reloaded.is_category("x")
    reloaded.select("x")
    assert reloaded.get_category() == "x"
    assert reloaded.select("img1") == "hello there"


def test_missing_file(tmp_path) -> None:
    """ A missing file is logged, and the navigator starts out empty instead of raising. """
    log = []
    filename = str(tmp_path / "does_not_exist.txt")
    m = AACMappings(filename, logger=log.append)
    assert m.list_locations() == []
    assert m.current.is_root
    assert len(log) == 1
    assert filename in log[0]
    assert not m.load(filename)
    assert len(log) == 2


def test_bad_encoding(tmp_path) -> None:
    filename = str(tmp_path / "binary.txt")
    with open(filename, 'wb') as fp:
        fp.write(b"one fruit\n>a \xff\xfe\xfa\n")
    log = []
    m = AACMappings(filename, logger=log.append)
    assert m.list_locations() == []
    assert "utf-8" in log[0]


def test_load_aborts_in_place(tmp_path) -> None:
    """ An error in the middle of a load leaves everything before it in place, with no rollback. """

    class _PickyMappings(AACMappings):
        def declare_category(self, key:str, name:str) -> None:
            if key == "bad":
                raise NullKeyError("This key is not allowed.")
            super().declare_category(key, name)

    filename = _write(tmp_path, "one fruit\n>a apple\nbad worse\n>b banana\ntwo veg\n>c carrot\n")
    log = []
    m = _PickyMappings(filename, logger=log.append)
    assert _snapshot(m) == [("one", "fruit", [("a", "apple")])]
    assert "not allowed" in log[0]


def test_load_merges(tmp_path) -> None:
    """ Loading another file adds to what is there already. """
    filename = _write(tmp_path, "three grain\n>r rice\none fruit\n>d date\n")
    m = AACMappings(SCENARIO_PATH)
    assert m.load(filename)
    assert _snapshot(m) == [("one", "fruit", [("a", "apple"), ("b", "banana"), ("d", "date")]),
                            ("two", "veg", [("c", "carrot")]),
                            ("three", "grain", [("r", "rice")])]


def test_save_failure(tmp_path) -> None:
    """ A save that can't be written is logged and reported by the return value. """
    log = []
    m = AACMappings(SCENARIO_PATH, logger=log.append)
    assert not m.save(str(tmp_path))
    assert str(tmp_path) in log[0]
    assert not m.save(str(tmp_path / "no_such_dir" / "file.txt"))
    assert len(log) == 2


def test_file_io_errors(tmp_path) -> None:
    io = MappingsFileIO()
    with pytest.raises(MappingsIOError):
        io.load(str(tmp_path / "nothing.txt"), _RecordingTarget())
    with pytest.raises(MappingsIOError):
        io.save(str(tmp_path), [])


def test_only_newlines_split_lines(tmp_path) -> None:
    """ Other Unicode line boundaries are ordinary characters inside names and spoken text. """
    filename = _write(tmp_path, "one fruit\x0cbasket\n>a apple\u2028pie\n>b ban\x85ana\x1dsplit\r\n")
    m = AACMappings(filename)
    assert _snapshot(m) == [("one", "fruit\x0cbasket", [("a", "apple\u2028pie"), ("b", "ban\x85ana\x1dsplit")])]
    # Text added at runtime comes back intact after a save and reload.
    m.select("one")
    m.add_item("c", "line\u2028sep")
    out_path = str(tmp_path / "saved.txt")
    assert m.save(out_path)
    reloaded = AACMappings(out_path)
    reloaded.select("one")
    assert reloaded.list_locations() == ["a", "b", "c"]
    assert reloaded.select("c") == "line\u2028sep"


def test_spaces_in_keys_split_on_reload(tmp_path) -> None:
    """ Keys are saved as-is, so a key with a space reloads as the part before the space,
        and the rest of the key is pushed into the display name or spoken text. """
    m = AACMappings()
    m.add_item("my board", "")
    m.add_item("my img", "hi")
    out_path = str(tmp_path / "saved.txt")
    assert m.save(out_path)
    with open(out_path, encoding='utf-8') as fp:
        assert fp.read() == "my board my board\n>my img hi\n"
    reloaded = AACMappings(out_path)
    assert reloaded.list_locations() == ["my"]
    reloaded.select("my")
    assert reloaded.get_category() == "board my board"
    assert reloaded.list_locations() == ["my"]
    # The image now shares its key with the category, which takes precedence.
    with pytest.raises(AlreadySelectedError):
        reloaded.select("my")
