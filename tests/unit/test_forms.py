from estate_import.mapping.forms import merge_client_form, merge_property_form


class TestMergePropertyForm:
    def test_truthy_extracted_values_win(self) -> None:
        merged = merge_property_form({"title": "Old", "price": 100}, {"title": "New", "price": 250})
        assert merged["title"] == "New"
        assert merged["price"] == 250

    def test_falsy_extracted_values_keep_current(self) -> None:
        merged = merge_property_form(
            {"title": "Typed by hand", "bedrooms": 3},
            {"title": "", "bedrooms": 0},
        )
        assert merged["title"] == "Typed by hand"
        assert merged["bedrooms"] == 3

    def test_missing_fields_default_to_empty(self) -> None:
        merged = merge_property_form({}, {})
        assert merged["location"] == ""
        assert set(merged) >= {"title", "price", "operation_type"}

    def test_unrelated_current_fields_survive(self) -> None:
        merged = merge_property_form({"status": "sold"}, {"title": "New"})
        assert merged["status"] == "sold"


class TestMergeClientForm:
    def test_notes_appended_under_header(self) -> None:
        merged = merge_client_form({"notes": "Met at fair"}, {"notes": "Looking for 2 beds"})
        assert merged["notes"] == "Met at fair\n\nExtracted content:\nLooking for 2 beds"

    def test_notes_without_previous(self) -> None:
        merged = merge_client_form({}, {"notes": "Raw text"})
        assert merged["notes"] == "Extracted content:\nRaw text"

    def test_contact_fields(self) -> None:
        merged = merge_client_form(
            {"name": "Ana", "email": "old@example.com"},
            {"name": "", "email": "new@example.com", "phone": "600"},
        )
        assert merged["name"] == "Ana"
        assert merged["email"] == "new@example.com"
        assert merged["phone"] == "600"
