from services.file_import import FileImportField, ImportedFile


def test_select_pairs_content_and_name():
    field = FileImportField()
    field.on_select(b"---cert---", "client.pem")
    assert field.selection == ImportedFile(b"---cert---", "client.pem")
    assert field.selection.size == 10


def test_new_selection_replaces_both_parts():
    field = FileImportField()
    field.on_select(b"first", "a.p12")
    field.on_select(b"second", "b.jks")
    assert field.selection.content == b"second"
    assert field.selection.filename == "b.jks"


def test_clear_removes_both():
    field = FileImportField()
    field.on_select("text", "c.pem")
    field.clear()
    assert field.selection is None
    assert not field.has_selection


def test_zero_byte_file_is_still_a_selection():
    field = FileImportField()
    field.on_select(b"", "empty.pem")
    assert field.selection == ImportedFile(b"", "empty.pem")
    assert field.selection.size == 0


def test_half_selection_counts_as_clear():
    field = FileImportField()
    field.on_select(b"data", "d.p12")
    field.on_select(b"data", "")
    assert field.selection is None
    field.on_select(b"data", "d.p12")
    field.on_select(None, "d.p12")
    assert field.selection is None


def test_content_is_not_inspected():
    field = FileImportField()
    field.on_select(b"\x00not a certificate", "garbage.pem")
    assert field.selection.content == b"\x00not a certificate"
