"""
Label rendering - resolve element text for an order and draw it with reportlab

layout_label() does the text resolution and line wrapping and is independent of
the PDF backend; render_label_pdf() only draws what it returns.
"""
import io
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, List, Optional

from django.conf import settings
from reportlab.lib.pagesizes import landscape, portrait
from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from core.utils import format_currency
from .verses import DEFAULT_MAX_LENGTH, VerseService

logger = logging.getLogger(__name__)

LINE_HEIGHT_FACTOR = 0.35

FONT_NAMES = {
    ('normal', 'normal'): 'Helvetica',
    ('bold', 'normal'): 'Helvetica-Bold',
    ('normal', 'italic'): 'Helvetica-Oblique',
    ('bold', 'italic'): 'Helvetica-BoldOblique',
}

# Values that are the house default and therefore not worth printing
DEFAULT_MILK = 'Whole'
DEFAULT_FOAM = 'Regular Foam'
DEFAULT_TEMPERATURE = 'Hot'


@dataclass
class LabelOrder:
    """The subset of an order a label needs; built from a saved Order or a preview payload."""
    id: str
    customer_name: str
    drink: str
    order_number: Optional[int] = None
    milk: Optional[str] = None
    syrup: Optional[str] = None
    foam: Optional[str] = None
    temperature: Optional[str] = None
    extra_shots: int = 0
    notes: Optional[str] = None
    price: Optional[Decimal] = None

    @classmethod
    def from_order(cls, order):
        return cls(
            id=str(order.id),
            order_number=order.order_number,
            customer_name=order.customer_name,
            drink=order.drink,
            milk=order.milk,
            syrup=order.syrup,
            foam=order.foam,
            temperature=order.temperature,
            extra_shots=order.extra_shots,
            notes=order.notes,
            price=order.price,
        )

    @property
    def display_number(self):
        if self.order_number is not None:
            return str(self.order_number)
        return self.id[-6:].upper()


@dataclass
class PlacedLine:
    text: str
    x: float
    y: float
    font_name: str
    font_size: float
    align: str


def font_name_for(element):
    return FONT_NAMES.get(
        (element.get('fontWeight', 'normal'), element.get('fontStyle', 'normal')),
        'Helvetica',
    )


def describe_details(order):
    """Non-default drink options, comma separated."""
    parts = []
    if order.milk and order.milk != DEFAULT_MILK:
        parts.append(order.milk)
    if order.syrup:
        parts.append(order.syrup)
    if order.foam and order.foam != DEFAULT_FOAM:
        parts.append(order.foam)
    if order.temperature and order.temperature != DEFAULT_TEMPERATURE:
        parts.append(order.temperature)
    if order.extra_shots:
        parts.append(f"{order.extra_shots} Extra Shot{'s' if order.extra_shots > 1 else ''}")
    return ', '.join(parts)


def resolve_element_text(element_type, order, verse_provider):
    if element_type == 'header':
        return getattr(settings, 'LABEL_HEADER_TEXT', 'HeBrews Coffee')
    if element_type == 'orderNumber':
        return f"#{order.display_number}"
    if element_type == 'customerName':
        return order.customer_name or ''
    if element_type == 'drink':
        return order.drink or ''
    if element_type == 'details':
        return describe_details(order)
    if element_type == 'notes':
        return f"Note: {order.notes}" if order.notes else ''
    if element_type == 'verse':
        return verse_provider(DEFAULT_MAX_LENGTH)
    if element_type == 'price':
        return format_currency(order.price) if order.price is not None else ''
    if element_type == 'barcode':
        return str(order.order_number).zfill(12) if order.order_number is not None else ''
    logger.warning("Unknown label element type %r skipped", element_type)
    return ''


def layout_label(layout, order, verse_provider: Callable[[int], str] = None) -> List[PlacedLine]:
    """
    Turn a layout and an order into positioned lines of text.

    Args:
        layout: Layout dict (width, height, elements) in millimetres
        order: LabelOrder
        verse_provider: Callable(max_length) -> str; defaults to the verse service

    Returns:
        PlacedLine list in element order; y is measured from the top edge
    """
    verse_provider = verse_provider or VerseService.get_verse_for_label
    lines = []
    for element in layout.get('elements', []):
        text = resolve_element_text(element.get('type'), order, verse_provider)
        if not text:
            continue

        font_name = font_name_for(element)
        font_size = float(element.get('fontSize', 10))
        x = float(element.get('x', 0))
        y = float(element.get('y', 0))
        align = element.get('align', 'left')
        max_width = element.get('maxWidth')
        max_lines = element.get('maxLines')

        if max_width and max_lines:
            wrapped = simpleSplit(text, font_name, font_size, float(max_width) * mm)[:int(max_lines)]
        else:
            wrapped = [text]

        for index, line in enumerate(wrapped):
            lines.append(PlacedLine(
                text=line,
                x=x,
                y=y + index * font_size * LINE_HEIGHT_FACTOR,
                font_name=font_name,
                font_size=font_size,
                align=align,
            ))
    return lines


def page_size_for(layout):
    size = (float(layout['width']) * mm, float(layout['height']) * mm)
    if layout['width'] > layout['height']:
        return landscape(size)
    return portrait(size)


def render_label_pdf(layout, order, verse_provider=None, title='Order Label'):
    """Render a single-page label PDF and return its bytes."""
    page_width, page_height = page_size_for(layout)
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=(page_width, page_height))
    pdf.setTitle(title)

    for line in layout_label(layout, order, verse_provider):
        pdf.setFont(line.font_name, line.font_size)
        x = line.x * mm
        y = page_height - line.y * mm
        if line.align == 'center':
            pdf.drawCentredString(x, y, line.text)
        elif line.align == 'right':
            pdf.drawRightString(x, y, line.text)
        else:
            pdf.drawString(x, y, line.text)

    pdf.showPage()
    pdf.save()
    return buffer.getvalue()
