"""
Integration tests for pdflib-compat.
Tests complete document workflows end-to-end with pypdf and reportlab.
"""

import os
import re
import shutil
import tempfile
import unittest

from pypdf import PdfReader, PdfWriter

from pdflib_compat import PDF, PathError, ShimOptions
from pdflib_compat.utils import get_pdf_info


class TestDocumentWorkflow(unittest.TestCase):
    """Test a complete legacy-style document from open_file to close."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.output = os.path.join(self.temp_dir, 'report.pdf')

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_two_page_document(self):
        """Test writing pages, text, shapes, outlines and metadata."""
        pdf = PDF.open_file(self.output)
        self.assertIsInstance(pdf, PDF)

        pdf.set_info_title('Quarterly Report')
        pdf.set_info_author('Finance')
        pdf.set_info_subject('Numbers')
        pdf.set_info_creator('integration tests')
        pdf.set_info_keywords('report, q3')

        self.assertTrue(pdf.begin_page(595, 842))
        self.assertTrue(pdf.add_outline('Cover'))
        self.assertTrue(pdf.set_font('helvetica-bold', 24, 'winansi'))
        self.assertTrue(pdf.show_xy('Quarterly Report', 50, 780))
        self.assertTrue(pdf.setgray_fill(0.8))
        self.assertTrue(pdf.rect(50, 600, 200, 100))
        self.assertTrue(pdf.fill())
        self.assertTrue(pdf.moveto(50, 590))
        self.assertTrue(pdf.lineto(545, 590))
        self.assertTrue(pdf.stroke())
        self.assertTrue(pdf.end_page())

        self.assertTrue(pdf.begin_page(842, 595))
        self.assertTrue(pdf.add_outline('Details'))
        self.assertTrue(pdf.save())
        self.assertTrue(pdf.translate(100, 100))
        self.assertTrue(pdf.rect(0, 0, 300, 200))
        self.assertTrue(pdf.clip())
        self.assertTrue(pdf.show_xy('Clipped details', 10, 10))
        self.assertTrue(pdf.restore())
        self.assertTrue(pdf.end_page())

        self.assertTrue(pdf.close())

        info = get_pdf_info(self.output)
        self.assertEqual(info.num_pages, 2)
        self.assertEqual(info.title, 'Quarterly Report')
        self.assertEqual(info.author, 'Finance')
        self.assertEqual(info.subject, 'Numbers')
        self.assertEqual(info.creator, 'integration tests')
        self.assertEqual(info.keywords, 'report, q3')
        self.assertEqual(info.producer, 'pdflib-compat')
        self.assertEqual(info.outlines, ['Cover', 'Details'])
        self.assertEqual(info.page_sizes, [(595.0, 842.0), (842.0, 595.0)])

        reader = PdfReader(self.output)
        self.assertIn('Quarterly Report', reader.pages[0].extract_text())

    def test_stringwidth_matches_font(self):
        """Test glyph-width lookup in the current font."""
        pdf = PDF.open_file(self.output)
        pdf.begin_page(200, 200)

        self.assertFalse(pdf.stringwidth('abc'))
        pdf.set_font('courier', 10)
        self.assertAlmostEqual(pdf.stringwidth('abc'), 18.0)

        pdf.set_font('Courier', 20)
        self.assertAlmostEqual(pdf.stringwidth('abc'), 36.0)
        pdf.close()

    def test_stringwidth_of_encoded_bytes(self):
        """Test bytes are measured in the encoding used to draw them."""
        pdf = PDF.open_file(self.output)
        pdf.begin_page(200, 200)
        pdf.set_font('courier', 10, 'winansi')

        self.assertTrue(pdf.show_xy(b'caf\xe9', 10, 10))
        self.assertAlmostEqual(pdf.stringwidth(b'caf\xe9'), 24.0)
        pdf.close()

    def test_unmatched_restore_leaves_page_balanced(self):
        """Test a restore without save does not touch the page content."""
        pdf = PDF.open_file(self.output)
        pdf.begin_page(200, 200)

        self.assertFalse(pdf.restore())
        pdf.rect(0, 0, 10, 10)
        pdf.fill()
        self.assertTrue(pdf.close())

        data = PdfReader(self.output).pages[0].get_contents().get_data()
        self.assertEqual(len(re.findall(rb'\bq\b', data)), len(re.findall(rb'\bQ\b', data)))

    def test_default_font_option(self):
        """Test the configured font is applied to new pages."""
        pdf = PDF.open_file(self.output, ShimOptions(default_font=('Times-Roman', 12)))
        pdf.begin_page(200, 200)

        self.assertGreater(pdf.stringwidth('abc'), 0)
        pdf.close()

    def test_close_without_end_page(self):
        """Test an open page is committed by close."""
        pdf = PDF.open_file(self.output)
        pdf.begin_page(200, 200)
        pdf.show_xy('unfinished page', 10, 100)

        self.assertTrue(pdf.close())
        reader = PdfReader(self.output)
        self.assertEqual(len(reader.pages), 1)
        self.assertIn('unfinished page', reader.pages[0].extract_text())

    def test_failed_path_calls_report_reason(self):
        """Test path failures leave the document usable."""
        pdf = PDF.open_file(self.output)
        pdf.begin_page(200, 200)

        self.assertFalse(pdf.fill())
        self.assertEqual(pdf.last_error, PathError.NO_PENDING_SHAPE)
        pdf.moveto(0, 0)
        pdf.lineto(10, 10)
        self.assertFalse(pdf.clip())
        self.assertEqual(pdf.last_error, PathError.UNSUPPORTED_SHAPE_FOR_OPERATION)
        self.assertTrue(pdf.stroke())
        self.assertTrue(pdf.close())


class TestExistingFile(unittest.TestCase):
    """Test opening a file name that already exists."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.output = os.path.join(self.temp_dir, 'existing.pdf')

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_existing_pdf_is_extended(self):
        """Test pages are appended to a readable existing PDF."""
        writer = PdfWriter()
        writer.add_blank_page(width=100, height=100)
        writer.add_metadata({'/Title': 'Original'})
        with open(self.output, 'wb') as f:
            writer.write(f)

        pdf = PDF.open_file(self.output)
        pdf.begin_page(300, 300)
        pdf.add_outline('Appended')
        pdf.end_page()
        pdf.close()

        info = get_pdf_info(self.output)
        self.assertEqual(info.num_pages, 2)
        self.assertEqual(info.title, 'Original')
        self.assertEqual(info.outlines, ['Appended'])

    def test_unreadable_file_is_replaced(self):
        """Test a non-PDF file is overwritten with a new document."""
        with open(self.output, 'wb') as f:
            f.write(b'not a pdf')

        pdf = PDF.open_file(self.output)
        pdf.begin_page(100, 100)
        pdf.end_page()
        self.assertTrue(pdf.close())

        self.assertEqual(get_pdf_info(self.output).num_pages, 1)

    def test_close_into_directory_fails(self):
        """Test a write failure is reported as False."""
        pdf = PDF.open_file(self.temp_dir)
        pdf.begin_page(100, 100)

        self.assertFalse(pdf.close())


if __name__ == '__main__':
    unittest.main()
