from estate_import.extraction.client_extractor import (
    extract_client_info,
    extract_email,
    extract_name,
    extract_phone,
)


class TestExtractClientInfo:
    def test_labeled_document(self) -> None:
        text = "Name: John Smith\nEmail: john@example.com\nPhone: +1 (555) 123-4567"
        info = extract_client_info(text)
        assert info == {
            "name": "John Smith",
            "email": "john@example.com",
            "phone": "+1 (555) 123-4567",
            "notes": text,
        }

    def test_empty_text(self) -> None:
        assert extract_client_info("") == {"name": "", "email": "", "phone": "", "notes": ""}

    def test_notes_capped_at_500_chars(self) -> None:
        info = extract_client_info("z" * 800)
        assert len(info["notes"]) == 500


class TestName:
    def test_spanish_label_with_accents(self) -> None:
        assert extract_name("Cliente: María López\nTel: 600") == "María López"

    def test_label_with_colon_preferred(self) -> None:
        assert extract_name("Client Name: John Doe") == "John Doe"

    def test_short_first_line_fallback(self) -> None:
        assert extract_name("Carlos Pérez\ncarlos@example.com") == "Carlos Pérez"

    def test_first_line_with_at_sign_is_not_a_name(self) -> None:
        assert extract_name("ana@example.com\nLooking for a flat") == ""

    def test_long_first_line_is_not_a_name(self) -> None:
        assert extract_name("a" * 60) == ""


class TestEmailAndPhone:
    def test_first_email_wins(self) -> None:
        assert extract_email("a@x.com or b@y.org") == "a@x.com"

    def test_no_email(self) -> None:
        assert extract_email("no address here") == ""

    def test_phone_without_label(self) -> None:
        assert extract_phone("Call me on 600 123 456 tomorrow") == "600 123 456"

    def test_whitespace_run_is_not_a_phone(self) -> None:
        assert extract_phone("Notes:        \nTel 600 123 456") == "600 123 456"

    def test_short_number_is_not_a_phone(self) -> None:
        assert extract_phone("Room 12") == ""
