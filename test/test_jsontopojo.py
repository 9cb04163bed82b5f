"""Tests for the JSON to class model and JSON to Java entry points."""

import json
import os
import sys
import tempfile
import unittest
from unittest.mock import patch

current_script_path = os.path.abspath(__file__)
project_root = os.path.dirname(os.path.dirname(current_script_path))
sys.path.append(project_root)

from json2pojo.errors import InputError, Json2PojoError, UnexpectedError
from json2pojo.jsontopojo import (convert_json_to_class_model, convert_json_to_java,
                                  infer_class_model)


def get_test_json_path(filename: str) -> str:
    """Get the path to a test JSON file."""
    return os.path.join(os.path.dirname(__file__), 'json', filename)


class TestInferClassModel(unittest.TestCase):
    """Test cases for infer_class_model"""

    def test_infers_registry(self):
        registry = infer_class_model('{"user-id": 1, "profile": {"bio": "x"}}', 'Account')
        self.assertEqual([c.name for c in registry], ['Account', 'Profile'])

    def test_invalid_json_reports_position(self):
        with self.assertRaises(InputError) as cm:
            infer_class_model('{"a": 1,\n "b": }', 'Example')
        self.assertIn('line 2', str(cm.exception))
        self.assertIsInstance(cm.exception.cause, json.JSONDecodeError)

    def test_invalid_root_name(self):
        for name in ['', '1abc', 'my-class', 'My Class']:
            with self.assertRaises(InputError):
                infer_class_model('{"a": 1}', name)

    def test_unrecognized_root_value(self):
        with self.assertRaises(InputError):
            infer_class_model('"just a string"', 'Example')

    def test_unexpected_failures_are_wrapped(self):
        with patch('json2pojo.jsontopojo.SchemaBuilder.build', side_effect=RuntimeError('boom')):
            with self.assertRaises(UnexpectedError) as cm:
                infer_class_model('{"a": 1}', 'Example')
        self.assertIn('boom', str(cm.exception))
        self.assertIsInstance(cm.exception.cause, RuntimeError)

    def test_all_errors_share_a_base_class(self):
        with self.assertRaises(Json2PojoError):
            infer_class_model('[1, 2, 3]', 'Example')


class TestConvertJsonToClassModel(unittest.TestCase):
    """Test cases for writing the class model as JSON"""

    def test_writes_model_file(self):
        model_path = os.path.join(tempfile.mkdtemp(), 'model', 'order.model.json')
        convert_json_to_class_model(get_test_json_path('order.json'), model_path, 'Order')
        with open(model_path, 'r', encoding='utf-8') as f:
            model = json.load(f)
        classes = {c['name']: c for c in model['classes']}
        self.assertEqual(list(classes), ['Order', 'Customer', 'Item'])
        order_fields = {f['name']: f for f in classes['Order']['fields']}
        self.assertEqual(order_fields['items']['type'], {'kind': 'list', 'items': {'kind': 'class', 'name': 'Item'}})
        self.assertEqual(order_fields['orderId']['property_name'], 'order-id')
        self.assertTrue(order_fields['total']['string_is_number'])
        self.assertEqual(order_fields['notes']['type'], {'kind': 'opaque'})

    def test_returns_model_without_writing(self):
        model_json = convert_json_to_class_model(get_test_json_path('order.json'), None, 'Order',
                                                 use_field_prefix=True)
        names = [f['name'] for f in json.loads(model_json)['classes'][0]['fields']]
        self.assertIn('mOrderId', names)


class TestConvertJsonToJava(unittest.TestCase):
    """Test cases for generating Java from a JSON file"""

    def test_generates_one_file_per_class(self):
        java_dir = tempfile.mkdtemp()
        fractions = []
        convert_json_to_java(get_test_json_path('order.json'), java_dir, 'Order', progress=fractions.append)
        package_dir = os.path.join(java_dir, 'order')
        self.assertEqual(sorted(os.listdir(package_dir)), ['Customer.java', 'Item.java', 'Order.java'])
        self.assertEqual(len(fractions), 3)
        self.assertEqual(fractions[-1], 1.0)

    def test_invalid_json_writes_nothing(self):
        json_path = os.path.join(tempfile.mkdtemp(), 'broken.json')
        with open(json_path, 'w', encoding='utf-8') as f:
            f.write('{"a": [1, 2}')
        java_dir = os.path.join(tempfile.mkdtemp(), 'out')
        with self.assertRaises(InputError):
            convert_json_to_java(json_path, java_dir, 'Example')
        self.assertFalse(os.path.exists(java_dir))


if __name__ == '__main__':
    unittest.main()
