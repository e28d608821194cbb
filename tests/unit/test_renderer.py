"""Unit tests for the variant renderer."""

import pytest

from variantstr.errors import MalformedTemplateError, PlaceholderFieldMismatchError
from variantstr.models import FieldKind, FieldSchema, PrimitiveValue, VariantSchema
from variantstr.templates import (
    bind,
    display_only,
    render,
    scan,
    substitute,
    template_only,
    validate_variant,
)
from variantstr.union import UnionSchema


class TestRenderDefaults:
    """Tests for rendering with default templates."""

    def test_default_unit(self) -> None:
        """Test a single-word unit variant."""
        result = render(VariantSchema(label="Green"), [])

        assert result.display == "Green"
        assert result.template == "Green"
        assert result.arguments == []

    def test_default_unit_segmented(self) -> None:
        """Test a multi-word unit variant."""
        assert render(VariantSchema(label="SlateGray"), []).display == "Slate Gray"

    def test_default_positional(self) -> None:
        """Test a positional variant without a template."""
        variant = VariantSchema(label="Wrap", fields=(FieldSchema(), FieldSchema()))
        result = render(variant, [1, "two"])

        assert result.display == "Wrap 1 two"
        assert result.template == "Wrap {} {}"
        assert result.arguments == ["1", "two"]

    def test_named_fields_omitted_by_default(self) -> None:
        """Test that a named variant without a template hides its fields."""
        variant = VariantSchema(
            label="UniqueColor",
            fields=(FieldSchema(name="label"), FieldSchema(name="id")),
        )
        result = render(variant, ["unique_color", 3])

        assert result.display == "Unique Color"
        assert result.arguments == []
        assert "unique_color" not in result.display


class TestRenderTemplates:
    """Tests for rendering with explicit templates."""

    def test_override_precedence(self) -> None:
        """Test that an explicit template replaces the label."""
        variant = VariantSchema(label="Red", explicit_template="Burgundy")
        assert render(variant, []).display == "Burgundy"

    def test_named_placeholder_binding(self, unique_variant: VariantSchema) -> None:
        """Test binding named placeholders by field name."""
        result = render(unique_variant, ["unique_color", 3])

        assert result.display == "Unique - unique_color_3"
        assert result.arguments == ["unique_color", "3"]
        assert len(result.arguments) == 2

    def test_named_placeholders_follow_template_order(self) -> None:
        """Test that arguments follow the template, not the declaration."""
        variant = VariantSchema(
            label="Point",
            fields=(FieldSchema(name="x"), FieldSchema(name="y")),
            explicit_template="({y}, {x})",
        )
        result = render(variant, [1, 2])

        assert result.display == "(2, 1)"
        assert result.arguments == ["2", "1"]

    def test_repeated_named_placeholder(self) -> None:
        """Test that a field may be referenced more than once."""
        variant = VariantSchema(
            label="Echo",
            fields=(FieldSchema(name="word"),),
            explicit_template="{word} {word}",
        )
        result = render(variant, ["hey"])

        assert result.display == "hey hey"
        assert result.arguments == ["hey", "hey"]

    def test_fewer_placeholders_than_fields(self) -> None:
        """Test that unreferenced positional fields are ignored."""
        variant = VariantSchema(
            label="Pair",
            fields=(FieldSchema(), FieldSchema()),
            explicit_template="first={}",
        )
        result = render(variant, ["a", "b"])

        assert result.display == "first=a"
        assert result.arguments == ["a"]

    def test_template_without_placeholders(self) -> None:
        """Test an override with no placeholders on a variant with fields."""
        variant = VariantSchema(
            label="Hidden",
            fields=(FieldSchema(),),
            explicit_template="secret",
        )
        result = render(variant, [42])

        assert result.display == "secret"
        assert result.arguments == []

    def test_primitive_text_forms(self) -> None:
        """Test natural text conversion of primitive values."""
        variant = VariantSchema(
            label="Values",
            fields=(FieldSchema(), FieldSchema(), FieldSchema()),
            explicit_template="{}|{}|{}",
        )
        assert render(variant, [2.5, True, None]).display == "2.5|True|None"


class TestRenderNested:
    """Tests for nested tagged-union fields."""

    def test_positional_nesting(
        self,
        color: UnionSchema,
        shape: UnionSchema,
        obj: UnionSchema,
    ) -> None:
        """Test that nested values render through their own display."""
        value = obj.make("Complex", color.make("Green"), shape.make("Circle", 2))
        result = value.rendered()

        assert result.display == "Color: Green. Shape: Circle with radius: 2."
        assert result.arguments == ["Green", "Circle with radius: 2"]
        assert result.template == "Color: {}. Shape: {}."

    def test_nested_override(
        self,
        color: UnionSchema,
        shape: UnionSchema,
        obj: UnionSchema,
    ) -> None:
        """Test that nested overrides apply inside the outer display."""
        value = obj.make("Complex", color.make("Red"), shape.make("Circle", 1))

        assert value.display() == "Color: Burgundy. Shape: Circle with radius: 1."

    def test_nested_field_requires_renderable(self) -> None:
        """Test that a nested-union field rejects plain values."""
        variant = VariantSchema(
            label="Box",
            fields=(FieldSchema(kind=FieldKind.NESTED_UNION),),
        )
        with pytest.raises(TypeError, match="expects a renderable value"):
            render(variant, ["not a union"])

    def test_primitive_adapter(self) -> None:
        """Test that primitive adapters render like raw values."""
        variant = VariantSchema(label="Size", fields=(FieldSchema(),))

        assert render(variant, [PrimitiveValue(7)]).display == "Size 7"


class TestRenderFailures:
    """Tests for placeholder/field mismatches."""

    def test_too_many_positional_placeholders(self) -> None:
        """Test two positional placeholders on a one-field variant."""
        variant = VariantSchema(
            label="Single",
            fields=(FieldSchema(),),
            explicit_template="{} and {}",
        )
        with pytest.raises(PlaceholderFieldMismatchError, match="no positional field"):
            render(variant, ["only"])

    def test_unknown_named_placeholder(self) -> None:
        """Test a named placeholder without a matching field."""
        variant = VariantSchema(
            label="Unique",
            fields=(FieldSchema(name="label"),),
            explicit_template="{Label}",
        )
        with pytest.raises(PlaceholderFieldMismatchError) as exc_info:
            render(variant, ["x"])

        assert exc_info.value.variant == "Unique"
        assert exc_info.value.placeholder == "{Label}"

    def test_positional_placeholder_on_named_variant(self) -> None:
        """Test that named fields are not consumed by positional placeholders."""
        variant = VariantSchema(
            label="Unique",
            fields=(FieldSchema(name="label"),),
            explicit_template="{}",
        )
        with pytest.raises(PlaceholderFieldMismatchError):
            render(variant, ["x"])

    def test_named_placeholder_on_unit_variant(self) -> None:
        """Test a named placeholder on a variant without fields."""
        variant = VariantSchema(label="Lonely", explicit_template="{name}")
        with pytest.raises(PlaceholderFieldMismatchError):
            render(variant, [])

    def test_malformed_template(self) -> None:
        """Test that malformed templates fail before binding."""
        variant = VariantSchema(label="Bad", explicit_template="oops {")
        with pytest.raises(MalformedTemplateError):
            render(variant, [])

    def test_value_count_must_match_fields(self) -> None:
        """Test that every declared field needs a value."""
        variant = VariantSchema(label="Pair", fields=(FieldSchema(), FieldSchema()))
        with pytest.raises(ValueError, match="has 2 fields, got 1"):
            render(variant, [1])

    def test_validate_variant_without_values(self) -> None:
        """Test that mismatches are detectable before any value exists."""
        variant = VariantSchema(
            label="Single",
            fields=(FieldSchema(),),
            explicit_template="{} {}",
        )
        with pytest.raises(PlaceholderFieldMismatchError):
            validate_variant(variant)


class TestRenderConsistency:
    """Tests tying display, template and arguments together."""

    @pytest.mark.parametrize(
        ("variant", "values"),
        [
            (VariantSchema(label="SlateGray"), []),
            (VariantSchema(label="Wrap", fields=(FieldSchema(), FieldSchema())), ["{}", 3]),
            (
                VariantSchema(
                    label="Unique",
                    fields=(FieldSchema(name="label"), FieldSchema(name="id")),
                    explicit_template="Unique - {label}_{id}",
                ),
                ["unique_color", 3],
            ),
        ],
    )
    def test_round_trip(self, variant: VariantSchema, values: list) -> None:
        """Test that substituting arguments into template gives display."""
        result = render(variant, values)

        rebuilt = substitute(result.template, scan(result.template), result.arguments)
        assert rebuilt == result.display
        assert len(result.arguments) == len(scan(result.template))

    def test_template_purity(self, shape: UnionSchema) -> None:
        """Test that the template ignores field contents."""
        small = shape.make("Circle", 1)
        large = shape.make("Circle", 100)

        assert small.template() == large.template() == "Circle with radius: {}"
        assert small.display() != large.display()

    def test_projections_agree(self, unique_variant: VariantSchema) -> None:
        """Test that display_only and template_only match render."""
        values = ["unique_color", 3]
        result = render(unique_variant, values)

        assert display_only(unique_variant, values) == result.display
        assert template_only(unique_variant) == result.template

    def test_bind_indices(self) -> None:
        """Test that bind maps placeholders to declaration indices."""
        variant = VariantSchema(
            label="Point",
            fields=(FieldSchema(name="x"), FieldSchema(name="y")),
            explicit_template="{y}{x}{y}",
        )
        assert bind(variant, scan(variant.explicit_template or "")) == [1, 0, 1]
