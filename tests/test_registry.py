"""Tests for PGN schemas and the schema registry."""

import json

import pytest
from n2k_decoder.core.errors import SchemaError
from n2k_decoder.schema.builtin import builtin_registry
from n2k_decoder.schema.registry import SchemaRegistry, load_registry
from n2k_decoder.schema.schema import FieldSchema, PgnSchema, Unit, UNIT_SCALES


class TestFieldSchema:
    """Tests for FieldSchema class."""
    
    def test_create_field(self) -> None:
        field = FieldSchema(name="Heading", start_byte=1, length_bytes=2, unit=Unit.RADIANS)
        
        assert field.end_byte == 3
        assert field.scale == UNIT_SCALES[Unit.RADIANS] == 0.0001
    
    def test_unitless_field_has_no_scale(self) -> None:
        assert FieldSchema(name="SID", start_byte=0).scale is None
    
    @pytest.mark.parametrize("start", [-1, 8])
    def test_start_byte_out_of_range(self, start: int) -> None:
        with pytest.raises(SchemaError, match="start_byte"):
            FieldSchema(name="x", start_byte=start)
    
    @pytest.mark.parametrize("length", [0, 9])
    def test_length_out_of_range(self, length: int) -> None:
        with pytest.raises(SchemaError, match="length_bytes"):
            FieldSchema(name="x", start_byte=0, length_bytes=length)
    
    def test_range_past_payload_is_allowed_at_construction(self) -> None:
        """Test that payload bounds are left to the decoder."""
        field = FieldSchema(name="x", start_byte=7, length_bytes=8)
        
        assert field.end_byte == 15
    
    def test_empty_name(self) -> None:
        with pytest.raises(SchemaError):
            FieldSchema(name="", start_byte=0)
    
    def test_from_dict(self) -> None:
        field = FieldSchema.from_dict({"name": "Heading", "start": 1, "length": 2, "units": "rad"})
        
        assert field == FieldSchema(name="Heading", start_byte=1, length_bytes=2, unit=Unit.RADIANS)
    
    def test_from_dict_default_unit(self) -> None:
        field = FieldSchema.from_dict({"name": "SID", "start": 0, "length": 1})
        
        assert field.unit is Unit.NONE
    
    def test_from_dict_unknown_unit(self) -> None:
        with pytest.raises(SchemaError, match="unknown unit"):
            FieldSchema.from_dict({"name": "x", "start": 0, "length": 1, "units": "furlong"})
    
    def test_from_dict_missing_key(self) -> None:
        with pytest.raises(SchemaError, match="malformed"):
            FieldSchema.from_dict({"name": "x", "start": 0})

    @pytest.mark.parametrize(
        "start,length",
        [(1.9, 2), (1, 2.0), ("1", 2), (True, 2), (0, None)],
    )
    def test_from_dict_rejects_non_integer_offsets(self, start, length) -> None:
        """Test that floats, strings and booleans are not coerced."""
        with pytest.raises(SchemaError, match="must be an integer"):
            FieldSchema.from_dict({"name": "x", "start": start, "length": length})


class TestPgnSchema:
    """Tests for PgnSchema class."""
    
    def test_fields_stored_as_tuple(self) -> None:
        schema = PgnSchema(pgn=127508, name="Test", fields=[FieldSchema(name="A", start_byte=0)])
        
        assert isinstance(schema.fields, tuple)
    
    def test_get_field(self) -> None:
        schema = builtin_registry()[127508]
        
        heading = schema.get_field("Heading")
        assert heading is not None
        assert heading.unit is Unit.RADIANS
        assert schema.get_field("NonExistent") is None
    
    def test_pgn_out_of_range(self) -> None:
        with pytest.raises(SchemaError, match="18-bit"):
            PgnSchema(pgn=999999, name="Too big")


class TestSchemaRegistry:
    """Tests for SchemaRegistry class."""
    
    @pytest.fixture
    def schema_table(self) -> dict:
        return {
            "130306": {
                "name": "Wind Data",
                "fields": [
                    {"name": "SID", "start": 0, "length": 1, "units": ""},
                    {"name": "Angle", "start": 3, "length": 2, "units": "rad"},
                ],
            }
        }
    
    def test_builtin_registry(self) -> None:
        registry = builtin_registry()
        
        assert 127508 in registry
        assert registry.registered_pgns == {127508}
        schema = registry[127508]
        assert schema.name == "Vessel Heading"
        assert [f.name for f in schema.fields] == [
            "SID", "Heading", "Deviation", "Variation", "Reference",
        ]
    
    def test_duplicate_pgn_rejected(self) -> None:
        schema = PgnSchema(pgn=127508, name="A")
        
        with pytest.raises(SchemaError, match="duplicate"):
            SchemaRegistry([schema, PgnSchema(pgn=127508, name="B")])
    
    def test_read_only(self) -> None:
        registry = builtin_registry()
        
        with pytest.raises(TypeError):
            registry[1] = PgnSchema(pgn=1, name="x")  # type: ignore
    
    def test_get_missing(self) -> None:
        assert builtin_registry().get(999999) is None
    
    def test_from_dict(self, schema_table: dict) -> None:
        registry = SchemaRegistry.from_dict(schema_table)
        
        assert len(registry) == 1
        assert registry[130306].get_field("Angle").unit is Unit.RADIANS
    
    def test_from_dict_bad_key(self) -> None:
        with pytest.raises(SchemaError, match="not a PGN"):
            SchemaRegistry.from_dict({"heading": {"name": "x", "fields": []}})
    
    def test_from_dict_missing_fields(self) -> None:
        with pytest.raises(SchemaError, match="fields"):
            SchemaRegistry.from_dict({"1": {"name": "x"}})
    
    def test_to_dict_matches_file_format(self, schema_table: dict) -> None:
        assert SchemaRegistry.from_dict(schema_table).to_dict() == schema_table
    
    def test_merged_overrides(self, schema_table: dict) -> None:
        base = builtin_registry()
        override = SchemaRegistry([PgnSchema(pgn=127508, name="Custom Heading")])
        
        merged = base.merged(override).merged(SchemaRegistry.from_dict(schema_table))
        
        assert merged[127508].name == "Custom Heading"
        assert 130306 in merged
        assert base[127508].name == "Vessel Heading"
    
    def test_load_registry(self, tmp_path, schema_table: dict) -> None:
        path = tmp_path / "pgns.json"
        path.write_text(json.dumps(schema_table), encoding="utf-8")
        
        registry = load_registry(path, base=builtin_registry())
        
        assert registry.registered_pgns == {127508, 130306}
    
    def test_load_registry_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "pgns.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(SchemaError, match="invalid JSON"):
            load_registry(path)

    def test_load_registry_not_utf8(self, tmp_path) -> None:
        path = tmp_path / "pgns.json"
        path.write_bytes(b'{"1": {"name": "\xff", "fields": []}}')

        with pytest.raises(SchemaError, match="invalid JSON"):
            load_registry(path)
