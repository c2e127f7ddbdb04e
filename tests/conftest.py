import io

import pytest
from docx import Document
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def _pdf(pages: list[list[str]]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 20
        c.showPage()
    c.save()
    return buf.getvalue()


def _docx(paragraphs: list[str]) -> bytes:
    document = Document()
    for text in paragraphs:
        document.add_paragraph(text)
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Single-page PDF with one line of known text."""
    return _pdf([["Hello PDF World"]])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Three-page PDF; the page text names its position."""
    return _pdf([["Page one content"], ["Page two content"], ["Page three content"]])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Valid PDF with a single blank page."""
    return _pdf([[]])


@pytest.fixture()
def listing_pdf_bytes() -> bytes:
    return _pdf([["Price: $250,000", "Type: Apartment", "Location: Calle Mayor 5"]])


@pytest.fixture()
def listing_docx_bytes() -> bytes:
    """Two listings separated by an empty paragraph, plus a trailing note."""
    return _docx(
        [
            "Sunny flat near the beach",
            "Price: $150,000",
            "Type: Piso",
            "",
            "Family house with garden",
            "Precio: 320,000",
            "4 habitaciones, 2 baños, 180 m2",
            "",
            "Contact the agency for viewings.",
        ]
    )


@pytest.fixture()
def client_docx_bytes() -> bytes:
    return _docx(["Nombre: María López", "Email: maria@example.com", "Tel: +34 600 123 456"])


@pytest.fixture()
def properties_csv_bytes() -> bytes:
    return (
        b"Title,Price,Location,Bedrooms,Bathrooms,Area,Type\r\n"
        b"Loft in Soho,450000,New York,1,1,70,condo\r\n"
        b"Cottage,210000,Cotswolds,3,2,120,house\r\n"
        b"\r\n"
        b"Plot,80000,Valencia,0,0,900,Terreno\r\n"
    )


@pytest.fixture()
def clients_csv_bytes() -> bytes:
    return (
        "Nombre,Email,Teléfono\n"
        "Ana Ruiz,ana@example.com,600111222\n"
        "Luis Gil,luis@example.com,600333444\n"
    ).encode("utf-8")


@pytest.fixture()
def listing_table_docx_bytes() -> bytes:
    """Heading paragraph followed by a listings table, one listing per row."""
    document = Document()
    document.add_paragraph("Listings")
    table = document.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Sunny flat"
    table.cell(0, 1).text = "Price: 150,000"
    table.cell(1, 0).text = "Country house"
    table.cell(1, 1).text = "Precio: 320,000"
    document.add_paragraph("Contact the agency for viewings.")
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()
