"""API tests for categories, suppliers and products."""
from decimal import Decimal

import pytest
from django.core.files.storage import default_storage
from django.core.files.uploadedfile import SimpleUploadedFile

from catalog.models import Category, Supplier, Product


def png(name='dish.png', size=64):
    return SimpleUploadedFile(name, b'\x89PNG' + b'0' * size, content_type='image/png')


@pytest.mark.django_db
def test_category_crud_and_soft_delete(api_client):
    r = api_client.post('/api/categories/', {'name': 'Desserts'}, format='json')
    assert r.status_code == 201
    category_id = r.json()['data']['id']
    assert r.json()['data']['is_active'] is True

    r = api_client.get('/api/categories/')
    assert r.status_code == 200
    assert r.json()['status'] == 200
    assert r.json()['message'] == 'Categories retrieved successfully'

    r = api_client.put(f'/api/categories/{category_id}/', {'description': 'Sweet things'}, format='json')
    assert r.status_code == 200
    assert r.json()['data']['name'] == 'Desserts'
    assert r.json()['data']['description'] == 'Sweet things'

    r = api_client.delete(f'/api/categories/{category_id}/')
    assert r.status_code == 200
    assert r.json() == {'status': True, 'message': 'Category deactivated successfully'}

    r = api_client.get(f'/api/categories/{category_id}/')
    assert r.status_code == 200
    assert r.json()['data']['is_active'] is False
    assert Category.objects.count() == 1


@pytest.mark.django_db
def test_category_validation_and_not_found(api_client):
    r = api_client.post('/api/categories/', {'description': 'no name'}, format='json')
    assert r.status_code == 422
    assert 'name' in r.json()['errors']

    r = api_client.delete('/api/categories/9999/')
    assert r.status_code == 404
    assert r.json()['message'] == 'Category not found'


@pytest.mark.django_db
def test_supplier_soft_delete(api_client):
    r = api_client.post('/api/suppliers/', {'name': 'Fresh Farms', 'email': 'not-an-email'}, format='json')
    assert r.status_code == 422
    assert 'email' in r.json()['errors']

    r = api_client.post('/api/suppliers/', {'name': 'Fresh Farms', 'phone': '555-0100'}, format='json')
    assert r.status_code == 201
    supplier_id = r.json()['data']['id']

    r = api_client.delete(f'/api/suppliers/{supplier_id}/')
    assert r.status_code == 200
    assert Supplier.objects.get(pk=supplier_id).is_active is False


@pytest.mark.django_db
def test_create_product_with_image(api_client, category):
    payload = {'category_id': category.pk, 'name': 'Pasta', 'price': '12.00', 'image': png('pasta.png')}
    r = api_client.post('/api/products/', payload, format='multipart')
    assert r.status_code == 201
    data = r.json()['data']
    assert data['image_path'].startswith('products/')
    assert data['image_path'].endswith('pasta.png')
    assert data['is_active'] is True
    assert data['is_featured'] is False
    assert default_storage.exists(data['image_path'])


@pytest.mark.django_db
def test_create_product_defaults_image(api_client, category):
    r = api_client.post('/api/products/', {'category_id': category.pk, 'name': 'Tea', 'price': '2.00'}, format='json')
    assert r.status_code == 201
    assert r.json()['data']['image_path'] == 'products/default.png'
    assert r.json()['data']['image_url'].endswith('/storage/products/default.png')


@pytest.mark.django_db
def test_create_product_rejects_bad_input(api_client):
    payload = {
        'category_id': 9999,
        'name': 'Bad',
        'price': '-1.00',
        'image': SimpleUploadedFile('menu.pdf', b'%PDF', content_type='application/pdf'),
    }
    r = api_client.post('/api/products/', payload, format='multipart')
    assert r.status_code == 422
    assert {'category_id', 'price', 'image'} <= set(r.json()['errors'])


@pytest.mark.django_db
def test_create_product_rejects_large_image(api_client, category, settings):
    settings.PRODUCT_IMAGE_MAX_SIZE = 1024
    payload = {'category_id': category.pk, 'name': 'Big', 'price': '1.00', 'image': png(size=2048)}
    r = api_client.post('/api/products/', payload, format='multipart')
    assert r.status_code == 422
    assert 'image' in r.json()['errors']


@pytest.mark.django_db
def test_update_product_image_replaces_old_file(api_client, category, django_capture_on_commit_callbacks):
    r = api_client.post(
        '/api/products/',
        {'category_id': category.pk, 'name': 'Pizza', 'price': '11.00', 'image': png('pizza.png')},
        format='multipart'
    )
    product_id = r.json()['data']['id']
    old_path = r.json()['data']['image_path']

    with django_capture_on_commit_callbacks(execute=True):
        r = api_client.patch(f'/api/products/{product_id}/', {'image': png('pizza-v2.png')}, format='multipart')
    assert r.status_code == 200
    new_path = r.json()['data']['image_path']

    assert new_path != old_path
    assert not default_storage.exists(old_path)
    assert default_storage.exists(new_path)
    assert len(default_storage.listdir('products')[1]) == 1


@pytest.mark.django_db
def test_remove_image(api_client, category, django_capture_on_commit_callbacks):
    r = api_client.post(
        '/api/products/',
        {'category_id': category.pk, 'name': 'Wrap', 'price': '6.00', 'image': png('wrap.png')},
        format='multipart'
    )
    product_id = r.json()['data']['id']
    old_path = r.json()['data']['image_path']

    with django_capture_on_commit_callbacks(execute=True):
        r = api_client.patch(f'/api/products/{product_id}/remove-image/')
    assert r.status_code == 200
    assert r.json()['message'] == 'Product image removed successfully'
    assert r.json()['data']['image_path'] == 'products/default.png'
    assert not default_storage.exists(old_path)


@pytest.mark.django_db
def test_product_soft_delete_and_listings(api_client, category, product):
    Product.objects.create(category=category, name='Steak', price=Decimal('25.00'), is_featured=True)

    r = api_client.get('/api/products/featured/')
    assert [p['name'] for p in r.json()['data']] == ['Steak']

    r = api_client.delete(f'/api/products/{product.pk}/')
    assert r.status_code == 200
    assert r.json()['message'] == 'Product deactivated successfully'

    r = api_client.get(f'/api/products/category/{category.pk}/')
    assert [p['name'] for p in r.json()['data']] == ['Steak']

    r = api_client.get(f'/api/products/{product.pk}/')
    assert r.status_code == 200
    assert r.json()['data']['is_active'] is False
    assert Product.objects.count() == 2


@pytest.mark.django_db
def test_product_list_filters(api_client, category, product):
    Product.objects.create(category=category, name='Steak', price=Decimal('25.00'), is_featured=True)

    r = api_client.get('/api/products/')
    assert len(r.json()['data']) == 2

    r = api_client.get('/api/products/', {'is_featured': 'true'})
    assert [p['name'] for p in r.json()['data']] == ['Steak']
