import json

from src.domain.entities.document import Document, SearchArtifact, SourceType
from src.infrastructure.persistence import (
    CACHE_CONTROL, load_artifact, render_headers_rule, serialize_artifact, write_artifact
)


def make_artifact():
    doc = Document(
        id='blog:café',
        source_type=SourceType.BLOG,
        title='Café',
        tags=['résumé'],
        date='2024-01-01T00:00:00.000Z',
        url='/blog/café/',
        text='café résumé',
    )
    return SearchArtifact(generated_at='2024-05-05T10:00:00.000Z', documents=[doc], index={'ca': [0], 'café': [0]})


def test_write_artifact(tmp_path):
    out = tmp_path / 'dist' / 'search-index.json'

    written = write_artifact(make_artifact(), str(out))

    assert written == {'artifact': str(out)}
    data = json.loads(out.read_text(encoding='utf-8'))
    assert data['generatedAt'] == '2024-05-05T10:00:00.000Z'
    assert data['documents'][0]['id'] == 'blog:café'
    assert data['index'] == {'ca': [0], 'café': [0]}
    assert not (tmp_path / 'dist' / 'search-index.json.tmp').exists()


def test_serialized_artifact_is_compact_utf8():
    payload = serialize_artifact(make_artifact())
    assert 'café' in payload
    assert ', ' not in payload and ': ' not in payload


def test_write_headers_file(tmp_path):
    out = tmp_path / 'search-index.json'

    written = write_artifact(make_artifact(), str(out), headers=True)

    headers = (tmp_path / '_headers').read_text(encoding='utf-8')
    assert written['headers'] == str(tmp_path / '_headers')
    assert headers.startswith('/search-index.json\n')
    assert f'Cache-Control: {CACHE_CONTROL}' in headers


def test_render_headers_rule_custom_route():
    assert render_headers_rule('/api/search.json').splitlines()[0] == '/api/search.json'


def test_load_artifact(tmp_path):
    out = tmp_path / 'a.json'
    write_artifact(make_artifact(), str(out))

    artifact = load_artifact(str(out))

    assert artifact.documents[0].title == 'Café'
    assert artifact.index['café'] == [0]
