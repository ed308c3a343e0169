from decimal import Decimal

from django.test import SimpleTestCase, override_settings

from labels.layout import default_label_config
from labels.rendering import (
    LabelOrder,
    describe_details,
    font_name_for,
    layout_label,
    page_size_for,
    render_label_pdf,
)


def fake_verse(max_length):
    return 'Be still - Psalm 46:10'


def make_order(**overrides):
    values = {
        'id': 'a1b2c3d4-0000-0000-0000-00000000beef',
        'order_number': 42,
        'customer_name': 'Maria',
        'drink': 'Latte',
        'milk': 'Oat',
        'syrup': 'Vanilla',
        'foam': 'Regular Foam',
        'temperature': 'Iced',
        'extra_shots': 2,
        'notes': None,
        'price': Decimal('7.00'),
    }
    values.update(overrides)
    return LabelOrder(**values)


class DescribeDetailsTest(SimpleTestCase):
    def test_only_non_default_options_are_listed(self):
        self.assertEqual(describe_details(make_order()), 'Oat, Vanilla, Iced, 2 Extra Shots')

    def test_single_extra_shot_is_singular(self):
        order = make_order(milk='Whole', syrup=None, temperature='Hot', extra_shots=1)
        self.assertEqual(describe_details(order), '1 Extra Shot')

    def test_all_defaults_is_empty(self):
        order = make_order(milk='Whole', syrup=None, foam=None, temperature='Hot', extra_shots=0)
        self.assertEqual(describe_details(order), '')


@override_settings(LABEL_HEADER_TEXT='HeBrews Coffee')
class LayoutLabelTest(SimpleTestCase):
    def test_default_layout_text(self):
        lines = layout_label(default_label_config(), make_order(), fake_verse)
        texts = [line.text for line in lines]

        self.assertEqual(texts[:4], ['HeBrews Coffee', '#42', 'Maria', 'Latte'])
        self.assertIn('Oat, Vanilla, Iced, 2 Extra Shots', texts)
        self.assertEqual(texts[-1], 'Be still - Psalm 46:10')

    def test_empty_notes_are_skipped(self):
        lines = layout_label(default_label_config(), make_order(notes=None), fake_verse)
        self.assertFalse(any(line.text.startswith('Note:') for line in lines))

        lines = layout_label(default_label_config(), make_order(notes='No lid'), fake_verse)
        self.assertIn('Note: No lid', [line.text for line in lines])

    def test_preview_order_without_number_uses_id_suffix(self):
        lines = layout_label(default_label_config(), make_order(order_number=None), fake_verse)
        self.assertEqual(lines[1].text, '#00BEEF')

    def test_wrapped_lines_are_truncated_and_spaced(self):
        layout = {
            'width': 50,
            'height': 30,
            'elements': [{
                'id': 'notes', 'type': 'notes', 'x': 2, 'y': 10, 'fontSize': 10,
                'fontWeight': 'normal', 'fontStyle': 'normal', 'align': 'left',
                'maxWidth': 20, 'maxLines': 2,
            }],
        }
        order = make_order(notes='please make it extra hot with a little cinnamon on top thanks')
        lines = layout_label(layout, order, fake_verse)

        self.assertEqual(len(lines), 2)
        self.assertEqual(lines[0].y, 10)
        self.assertAlmostEqual(lines[1].y, 10 + 10 * 0.35)

    def test_unwrapped_element_is_single_line(self):
        layout = {
            'width': 50,
            'height': 30,
            'elements': [{
                'id': 'notes', 'type': 'notes', 'x': 2, 'y': 10, 'fontSize': 10,
                'maxWidth': 20,
            }],
        }
        order = make_order(notes='please make it extra hot with a little cinnamon on top thanks')
        self.assertEqual(len(layout_label(layout, order, fake_verse)), 1)

    def test_price_and_barcode_elements(self):
        layout = {
            'width': 50,
            'height': 30,
            'elements': [
                {'id': 'p', 'type': 'price', 'x': 1, 'y': 5, 'fontSize': 8},
                {'id': 'b', 'type': 'barcode', 'x': 1, 'y': 10, 'fontSize': 8},
            ],
        }
        texts = [line.text for line in layout_label(layout, make_order(), fake_verse)]
        self.assertEqual(texts, ['$7.00', '000000000042'])

    def test_verse_provider_not_called_without_verse_element(self):
        def exploding_provider(max_length):
            raise AssertionError('verse should not be requested')

        layout = {'width': 50, 'height': 30, 'elements': [
            {'id': 'd', 'type': 'drink', 'x': 1, 'y': 5, 'fontSize': 8},
        ]}
        self.assertEqual(len(layout_label(layout, make_order(), exploding_provider)), 1)


class FontAndPageTest(SimpleTestCase):
    def test_font_variants(self):
        self.assertEqual(font_name_for({}), 'Helvetica')
        self.assertEqual(font_name_for({'fontWeight': 'bold'}), 'Helvetica-Bold')
        self.assertEqual(font_name_for({'fontStyle': 'italic'}), 'Helvetica-Oblique')
        self.assertEqual(font_name_for({'fontWeight': 'bold', 'fontStyle': 'italic'}), 'Helvetica-BoldOblique')

    def test_page_size_keeps_dimensions(self):
        wide_width, wide_height = page_size_for({'width': 90.3, 'height': 36})
        self.assertGreater(wide_width, wide_height)

        tall_width, tall_height = page_size_for({'width': 36, 'height': 90.3})
        self.assertLess(tall_width, tall_height)

    def test_render_returns_pdf_bytes(self):
        content = render_label_pdf(default_label_config(), make_order(), fake_verse)
        self.assertTrue(content.startswith(b'%PDF'))
