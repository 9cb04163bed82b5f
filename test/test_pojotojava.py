"""Tests for generating Java classes from an inferred class model."""

import os
import re
import sys
import tempfile
import unittest

current_script_path = os.path.abspath(__file__)
project_root = os.path.dirname(os.path.dirname(current_script_path))
sys.path.append(project_root)

from json2pojo.classmodel import DEFERRED
from json2pojo.jsontopojo import infer_class_model
from json2pojo.pojotojava import PojoToJava, convert_class_model_to_java, safe_identifier

ORDER_JSON = '''
{
    "user-id": 7,
    "price": "9.99",
    "tags": ["a"],
    "address": {"city": "Paris"},
    "note": null
}
'''


class TestPojoToJava(unittest.TestCase):
    """Test cases for the Java renderer"""

    def generate(self, json_text=ORDER_JSON, use_field_prefix=False, **options):
        """Infer classes, render them into a temp dir and return the sources by class name"""
        registry = infer_class_model(json_text, 'Order', use_field_prefix)
        java_dir = tempfile.mkdtemp()
        files = convert_class_model_to_java(registry, java_dir, 'com.example.orders', **options)
        sources = {}
        for file_name in files:
            self.assertEqual(os.path.dirname(file_name), os.path.join(java_dir, 'com', 'example', 'orders'))
            with open(file_name, 'r', encoding='utf-8') as f:
                sources[os.path.splitext(os.path.basename(file_name))[0]] = f.read()
        return sources

    def test_class_header(self):
        source = self.generate()['Order']
        self.assertTrue(source.startswith('package com.example.orders;'))
        self.assertIn('@Generated("json2pojo")', source)
        self.assertIn('@SuppressWarnings("unused")', source)
        self.assertIn('public class Order {', source)
        self.assertIn('import java.util.List;', source)
        self.assertIn('import javax.annotation.Generated;', source)

    def test_fields_and_types(self):
        source = self.generate()['Order']
        self.assertIn('private Long userId;', source)
        self.assertIn('private String price;', source)
        self.assertIn('private List<String> tags;', source)
        self.assertIn('private Address address;', source)
        self.assertIn('private Object note;', source)

    def test_fields_in_sorted_order(self):
        source = self.generate()['Order']
        declared = re.findall(r'private \S+ (\w+);', source)
        self.assertEqual(declared, ['address', 'note', 'price', 'tags', 'userId'])

    def test_getters_and_setters(self):
        source = self.generate()['Order']
        self.assertIn('public Long getUserId() {', source)
        self.assertIn('public void setUserId(Long userId) {', source)
        self.assertIn('this.userId = userId;', source)
        self.assertNotIn('Builder', source)

    def test_serialized_name_only_for_renamed_fields(self):
        source = self.generate()['Order']
        self.assertIn('@SerializedName("user-id")', source)
        self.assertEqual(source.count('@SerializedName('), 1)
        self.assertIn('import com.google.gson.annotations.SerializedName;', source)
        address = self.generate()['Address']
        self.assertNotIn('SerializedName', address)
        self.assertNotIn('import java.util.List;', address)

    def test_serialized_name_can_be_disabled(self):
        source = self.generate(serialized_name_annotation=False)['Order']
        self.assertNotIn('SerializedName', source)

    def test_double_value_getters(self):
        self.assertNotIn('getPriceValue', self.generate()['Order'])
        source = self.generate(use_double_value_getters=True)['Order']
        self.assertIn('public double getPriceValue() {', source)
        self.assertIn('return Double.valueOf(price);', source)
        self.assertEqual(source.count('Value() {'), 1)

    def test_field_prefix_keeps_accessor_names(self):
        source = self.generate(use_field_prefix=True)['Order']
        self.assertIn('private Long mUserId;', source)
        self.assertIn('public Long getUserId() {', source)
        self.assertIn('public void setUserId(Long userId) {', source)
        self.assertIn('this.mUserId = userId;', source)
        self.assertIn('@SerializedName("price")', source)

    def test_builders(self):
        sources = self.generate(generate_builders=True)
        for class_name, source in sources.items():
            self.assertNotIn('public void set', source)
            self.assertEqual(source.count('public static class Builder {'), 1)
            self.assertEqual(source.count(f'public {class_name} build() {{'), 1)
        order = sources['Order']
        self.assertEqual(len(re.findall(r'public Order\.Builder with\w+\(', order)), 5)
        self.assertIn('public Order.Builder withUserId(Long userId) {', order)
        self.assertIn('Order order = new Order();', order)
        self.assertIn('order.userId = this.userId;', order)
        self.assertIn('return order;', order)

    def test_progress_callback(self):
        registry = infer_class_model(ORDER_JSON, 'Order')
        fractions = []
        pojotojava = PojoToJava('com.example')
        pojotojava.convert_registry(registry, tempfile.mkdtemp(), fractions.append)
        self.assertEqual(fractions, [0.5, 1.0])

    def test_unresolved_type_is_rejected(self):
        with self.assertRaises(ValueError):
            PojoToJava().map_type_to_java(DEFERRED)

    def test_reserved_words(self):
        sources = self.generate('{"class": "x", "2nd": 1}')
        self.assertIn('private String _class;', sources['Order'])
        self.assertIn('@SerializedName("class")', sources['Order'])
        self.assertIn('public String get_Class() {', sources['Order'])
        self.assertNotIn('getClass()', sources['Order'])
        self.assertIn('public void setClass(String _class) {', sources['Order'])
        self.assertEqual(safe_identifier('2nd'), '_2nd')
        self.assertEqual(safe_identifier(''), 'value')

    def test_digit_class_names(self):
        sources = self.generate('{"12": {"a": 1}, "rows": [{"34": {"b": 2}}]}')
        self.assertEqual(sorted(sources), ['Order', 'Row', '_2', '_4'])
        self.assertIn('public class _2 {', sources['_2'])
        self.assertIn('private _2 _2;', sources['Order'])
        self.assertIn('private _4 _4;', sources['Row'])


if __name__ == '__main__':
    unittest.main()
