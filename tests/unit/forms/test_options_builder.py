from pydantic import BaseModel

from formgen.forms.generator import generate_fields
from formgen.forms.options import OptionsBuilder, create_options


class Profile(BaseModel):
    username: str
    age: int


def test_create_options_starts_empty():
    builder = create_options(Profile)

    assert isinstance(builder, OptionsBuilder)
    assert builder.build() == {}


def test_with_overrides_is_chainable_and_later_keys_win():
    options = (
        create_options(Profile)
        .with_overrides({"username": {"placeholder": "Username"}})
        .with_overrides({"age": {"placeholder": "Age"}})
        .with_overrides({"username": {"label": "Login"}})
        .build()
    )

    assert options == {
        "username": {"label": "Login"},
        "age": {"placeholder": "Age"},
    }


def test_nested_overrides_replace_rather_than_merge():
    options = (
        create_options(Profile)
        .with_overrides({"address": {"street": {"label": "Street"}}})
        .with_overrides({"address": {"city": {"label": "Town"}}})
        .build()
    )

    assert options == {"address": {"city": {"label": "Town"}}}


def test_with_overrides_returns_new_builder():
    base = create_options(Profile)
    extended = base.with_overrides({"age": {"placeholder": "Age"}})

    assert base.build() == {}
    assert extended.build() == {"age": {"placeholder": "Age"}}


def test_build_returns_a_copy():
    builder = create_options(Profile).with_overrides({"age": {"placeholder": "Age"}})

    built = builder.build()
    built["username"] = {"label": "Mutated"}

    assert "username" not in builder.build()


def test_built_options_feed_generate_fields():
    options = create_options(Profile).with_overrides({"age": {"placeholder": "Age"}}).build()

    fields = generate_fields(Profile, options)

    assert fields[1]["placeholder"] == "Age"
    assert "placeholder" not in fields[0]
