from file_cleanup.keys import build_storage_key


def test_key_is_deterministic():
    first = build_storage_key('//data//files', '/data', 'a.txt')
    assert first == build_storage_key('//data//files', '/data', 'a.txt')
    assert first == '///filesa.txt'


def test_root_path_removed_and_separators_normalised():
    key = build_storage_key('C:\\inetpub\\site\\uploads\\', 'C:\\inetpub\\site\\', 'report.pdf')
    assert key == 'uploads/report.pdf'
    assert '\\' not in key


def test_duplicated_file_name_removed_from_base_path():
    key = build_storage_key('/root/uploads//photo.png', '/root/', 'photo.png')
    assert key == 'uploadsphoto.png'


def test_empty_root_path_leaves_base_path():
    assert build_storage_key('docs/', '', 'x.txt') == 'docs/x.txt'
