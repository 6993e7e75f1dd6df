import io

COLLECTION = {
    'id': 'linen-dreams',
    'name': 'Linen Dreams',
    'description': 'Light and airy',
    'cover_image': 'https://cdn.test/cover.jpg',
    'images': ['https://cdn.test/1.jpg'],
    'display_order': 1,
}


def image(name='photo.jpg', size=16):
    return (io.BytesIO(b'x' * size), name, 'image/jpeg')


def test_list_is_fetched_and_sorted(admin_client, fake_api):
    fake_api.on('GET', '/api/collections', [
        dict(COLLECTION, id='b', name='Velvet Elegance', display_order=2),
        dict(COLLECTION, id='a', name='Linen Dreams', display_order=1),
    ])
    body = admin_client.get('/admin/collections').get_data(as_text=True)
    assert body.index('Linen Dreams') < body.index('Velvet Elegance')


def test_create_with_urls_then_refetches(admin_client, fake_api):
    r = admin_client.post('/admin/collections', data={
        'name': 'Roman Shades',
        'description': 'Tailored',
        'cover_image': 'https://cdn.test/cover.jpg',
        'images': 'https://cdn.test/1.jpg\n\nhttps://cdn.test/2.jpg',
        'display_order': '3',
    })
    assert r.status_code in (301, 302)
    (post,) = fake_api.find('POST', '/api/collections')
    assert post['json'] == {
        'name': 'Roman Shades',
        'description': 'Tailored',
        'cover_image': 'https://cdn.test/cover.jpg',
        'images': ['https://cdn.test/1.jpg', 'https://cdn.test/2.jpg'],
        'video_url': None,
        'display_order': 3,
    }

    fake_api.calls.clear()
    admin_client.get(r.headers['Location'])
    assert fake_api.find('GET', '/api/collections')


def test_files_are_uploaded_before_the_collection_is_saved(admin_client, fake_api):
    fake_api.serve_uploads()
    r = admin_client.post('/admin/collections', data={
        'name': 'Modern Minimalist',
        'cover_file': image('cover.jpg'),
        'image_files': [image('g1.jpg'), image('g2.jpg')],
        'video_file': (io.BytesIO(b'v' * 32), 'tour.mp4', 'video/mp4'),
    }, content_type='multipart/form-data')
    assert r.status_code in (301, 302)

    assert len(fake_api.find('POST', '/api/upload')) == 3
    assert len(fake_api.find('POST', '/api/upload-video')) == 1
    assert fake_api.calls[-1]['path'] == '/api/collections'

    (post,) = fake_api.find('POST', '/api/collections')
    assert post['json']['cover_image'] == 'https://cdn.test/cover.jpg'
    assert post['json']['images'] == ['https://cdn.test/g1.jpg', 'https://cdn.test/g2.jpg']
    assert post['json']['video_url'] == 'https://cdn.test/tour.mp4'


def test_missing_cover_keeps_form_open(admin_client, fake_api):
    r = admin_client.post('/admin/collections', data={'name': 'No Cover', 'description': 'kept text'})
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'Please upload a cover image' in body
    assert 'kept text' in body
    assert not fake_api.find('POST', '/api/collections')


def test_oversized_image_is_rejected_before_upload(admin_client, fake_api, app):
    app.config['MAX_IMAGE_SIZE'] = 8
    r = admin_client.post('/admin/collections', data={
        'name': 'Big',
        'cover_file': image('huge.jpg', size=64),
    }, content_type='multipart/form-data')
    assert 'File size must be less than' in r.get_data(as_text=True)
    assert not fake_api.find('POST')


def test_wrong_file_type_is_rejected(admin_client, fake_api):
    r = admin_client.post('/admin/collections', data={
        'name': 'Docs',
        'cover_file': (io.BytesIO(b'%PDF'), 'brochure.pdf', 'application/pdf'),
    }, content_type='multipart/form-data')
    assert 'Please upload an image file' in r.get_data(as_text=True)
    assert not fake_api.find('POST', '/api/upload')


def test_server_failure_keeps_form_state(admin_client, fake_api):
    fake_api.on('POST', '/api/collections', {'error': 'Name already taken'}, status=400)
    r = admin_client.post('/admin/collections', data={
        'name': 'Linen Dreams',
        'cover_image': 'https://cdn.test/cover.jpg',
    })
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'Name already taken' in body
    assert 'value="Linen Dreams"' in body


def test_edit_loads_and_updates(admin_client, fake_api):
    fake_api.on('GET', '/api/collections/linen-dreams', COLLECTION)
    r = admin_client.get('/admin/collections/linen-dreams/edit')
    assert r.status_code == 200
    assert 'Linen Dreams' in r.get_data(as_text=True)

    r = admin_client.post('/admin/collections/linen-dreams/edit', data={
        'name': 'Linen Dreams II',
        'cover_image': COLLECTION['cover_image'],
        'images': '\n'.join(COLLECTION['images']),
        'display_order': '1',
    })
    assert r.status_code in (301, 302)
    (put,) = fake_api.find('PUT', '/api/collections/linen-dreams')
    assert put['json']['name'] == 'Linen Dreams II'


def test_edit_of_missing_collection_is_404(admin_client, fake_api):
    fake_api.on('GET', '/api/collections/nope', {'error': 'Not found'}, status=404)
    assert admin_client.get('/admin/collections/nope/edit').status_code == 404


def test_delete(admin_client, fake_api):
    r = admin_client.post('/admin/collections/linen-dreams/delete')
    assert r.status_code in (301, 302)
    assert fake_api.find('DELETE', '/api/collections/linen-dreams')


def test_subcategory_with_urls(admin_client, fake_api):
    r = admin_client.post('/admin/collections/linen-dreams/subcategories', data={
        'name': 'Sheers',
        'images': 'https://cdn.test/s1.jpg\nhttps://cdn.test/s2.jpg',
        'display_order': '2',
    })
    assert r.status_code in (301, 302)
    (post,) = fake_api.find('POST', '/api/subcategories')
    assert post['json'] == {
        'collection_id': 'linen-dreams',
        'name': 'Sheers',
        'images': ['https://cdn.test/s1.jpg', 'https://cdn.test/s2.jpg'],
        'display_order': 2,
    }


def test_subcategory_with_uploaded_files(admin_client, fake_api):
    fake_api.serve_uploads()
    admin_client.post('/admin/collections/linen-dreams/subcategories', data={
        'name': 'Blackout',
        'images': 'https://cdn.test/kept.jpg',
        'image_files': [image('b1.jpg'), image('b2.jpg')],
    }, content_type='multipart/form-data')
    (post,) = fake_api.find('POST', '/api/subcategories')
    assert post['json']['images'] == [
        'https://cdn.test/kept.jpg', 'https://cdn.test/b1.jpg', 'https://cdn.test/b2.jpg']


def test_subcategory_without_images_is_rejected(admin_client, fake_api):
    fake_api.on('GET', '/api/collections/linen-dreams', COLLECTION)
    r = admin_client.post('/admin/collections/linen-dreams/subcategories', data={'name': 'Empty'})
    assert r.status_code == 200
    assert 'between 1 and 5 images' in r.get_data(as_text=True)
    assert not fake_api.find('POST', '/api/subcategories')


def test_subcategory_with_six_images_is_rejected_before_upload(admin_client, fake_api):
    fake_api.on('GET', '/api/collections/linen-dreams', COLLECTION)
    fake_api.serve_uploads()
    r = admin_client.post('/admin/collections/linen-dreams/subcategories', data={
        'name': 'Too many',
        'images': '\n'.join(f'https://cdn.test/{i}.jpg' for i in range(3)),
        'image_files': [image(f'f{i}.jpg') for i in range(3)],
    }, content_type='multipart/form-data')
    assert 'between 1 and 5 images' in r.get_data(as_text=True)
    assert not fake_api.find('POST', '/api/upload')
    assert not fake_api.find('POST', '/api/subcategories')


def test_delete_subcategory_returns_to_collection(admin_client, fake_api):
    r = admin_client.post('/admin/subcategories/s1/delete', data={'collection_id': 'linen-dreams'})
    assert r.headers['Location'].endswith('/admin/collections/linen-dreams/edit')
    assert fake_api.find('DELETE', '/api/subcategories/s1')


def test_immediate_upload_endpoint(admin_client, fake_api):
    fake_api.serve_uploads()
    r = admin_client.post('/admin/upload', data={'image': image('now.jpg')},
                          content_type='multipart/form-data')
    assert r.get_json() == {'url': 'https://cdn.test/now.jpg'}


def test_immediate_upload_rejects_wrong_type(admin_client, fake_api):
    r = admin_client.post('/admin/upload-video', data={'video': image('not-a-video.jpg')},
                          content_type='multipart/form-data')
    assert r.status_code == 400
    assert 'error' in r.get_json()


def test_missing_name_uploads_nothing(admin_client, fake_api):
    fake_api.serve_uploads()
    r = admin_client.post('/admin/collections', data={
        'name': '',
        'cover_file': image('cover.jpg'),
        'image_files': [image('g1.jpg')],
    }, content_type='multipart/form-data')
    assert 'Collection name is required' in r.get_data(as_text=True)
    assert not fake_api.find('POST')


def test_failed_upload_keeps_urls_of_the_others(admin_client, fake_api):
    def upload(call):
        (_, part), = call['files'].items()
        if part[0] == 'bad.jpg':
            return 500, {'error': 'Disk full'}
        return 200, {'url': f'https://cdn.test/{part[0]}'}
    fake_api.handle('POST', '/api/upload', upload)

    r = admin_client.post('/admin/collections', data={
        'name': 'Partial',
        'cover_file': image('cover.jpg'),
        'image_files': [image('g1.jpg'), image('bad.jpg')],
    }, content_type='multipart/form-data')
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'Disk full' in body
    assert 'value="https://cdn.test/cover.jpg"' in body
    assert 'https://cdn.test/g1.jpg' in body
    assert len(fake_api.find('POST', '/api/upload')) == 3
    assert not fake_api.find('POST', '/api/collections')
