from swagger_search.resolver import MAX_RESOLVE_DEPTH, resolve_schema

PET_REF = {"$ref": "#/components/schemas/Pet"}


class TestResolveRefs:
    def test_resolves_component_ref(self, petstore_doc):
        pet = resolve_schema(PET_REF, petstore_doc)
        assert pet["type"] == "object"
        assert pet["properties"]["id"]["type"] == "integer"
        assert pet["required"] == ["id", "name"]

    def test_resolves_definitions_ref(self, users_doc):
        user = resolve_schema({"$ref": "#/definitions/User"}, users_doc)
        assert user["properties"]["address"]["properties"]["city"] == {"type": "string"}

    def test_ref_chain_is_flattened(self):
        doc = {
            "components": {
                "schemas": {
                    "Alias": {"$ref": "#/components/schemas/Target"},
                    "Target": {"type": "string", "format": "uuid"},
                }
            }
        }
        assert resolve_schema({"$ref": "#/components/schemas/Alias"}, doc) == {"type": "string", "format": "uuid"}

    def test_unresolvable_ref_returned_unchanged(self, users_doc):
        ref = {"$ref": "#/definitions/ServerError"}
        assert resolve_schema(ref, users_doc) is ref

    def test_external_ref_returned_unchanged(self, petstore_doc):
        ref = {"$ref": "common.yaml#/components/schemas/Pet"}
        assert resolve_schema(ref, petstore_doc) is ref

    def test_ref_to_empty_schema_resolves(self):
        doc = {"components": {"schemas": {"Any": {}}}}
        assert resolve_schema({"$ref": "#/components/schemas/Any"}, doc) == {}

    def test_empty_schema_property_resolves(self):
        doc = {"components": {"schemas": {"Any": {}}}}
        schema = {"type": "object", "properties": {"payload": {"$ref": "#/components/schemas/Any"}}}
        assert resolve_schema(schema, doc)["properties"]["payload"] == {}

    def test_ref_to_null_target_is_left_alone(self):
        doc = {"components": {"schemas": {"Nothing": None}}}
        ref = {"$ref": "#/components/schemas/Nothing"}
        assert resolve_schema(ref, doc) is ref

    def test_no_document_leaves_ref(self):
        assert resolve_schema(PET_REF, None) is PET_REF


class TestResolveShapes:
    def test_array_items_resolved(self, petstore_doc):
        schema = {"type": "array", "items": PET_REF}
        resolved = resolve_schema(schema, petstore_doc)
        assert resolved["type"] == "array"
        assert resolved["items"]["properties"]["name"] == {"type": "string"}

    def test_object_properties_keep_order_and_siblings(self, petstore_doc):
        schema = {
            "type": "object",
            "required": ["pet"],
            "properties": {"pet": PET_REF, "count": {"type": "integer"}, "note": {"type": "string"}},
        }
        resolved = resolve_schema(schema, petstore_doc)
        assert list(resolved["properties"]) == ["pet", "count", "note"]
        assert resolved["required"] == ["pet"]
        assert resolved["properties"]["pet"]["type"] == "object"

    def test_all_of_resolved(self, petstore_doc):
        resolved = resolve_schema({"$ref": "#/components/schemas/NewPet"}, petstore_doc)
        assert resolved["allOf"][0]["properties"]["name"] == {"type": "string"}
        assert resolved["allOf"][1]["properties"]["note"] == {"type": "string"}

    def test_any_of_and_one_of_pass_through(self, petstore_doc):
        any_of = {"anyOf": [PET_REF, {"type": "string"}]}
        one_of = {"oneOf": [PET_REF]}
        assert resolve_schema(any_of, petstore_doc) is any_of
        assert resolve_schema(one_of, petstore_doc) is one_of

    def test_primitive_and_empty_pass_through(self, petstore_doc):
        primitive = {"type": "string", "enum": ["a", "b"]}
        assert resolve_schema(primitive, petstore_doc) is primitive
        assert resolve_schema(None, petstore_doc) is None
        assert resolve_schema({}, petstore_doc) == {}

    def test_input_not_mutated(self, petstore_doc):
        schema = {"type": "array", "items": PET_REF}
        resolve_schema(schema, petstore_doc)
        assert schema == {"type": "array", "items": {"$ref": "#/components/schemas/Pet"}}
        assert "$ref" in petstore_doc["components"]["schemas"]["Pet"]["properties"]["owner"]


class TestResolveDepth:
    def test_cycle_terminates_at_depth_ceiling(self, petstore_doc):
        # Pet -> Owner -> pets[] -> Pet -> Owner is cut off past the ceiling
        pet = resolve_schema(PET_REF, petstore_doc)
        owner = pet["properties"]["owner"]
        inner_pet = owner["properties"]["pets"]["items"]
        assert owner["type"] == "object"
        assert inner_pet["type"] == "object"
        assert inner_pet["properties"]["owner"] == {"$ref": "#/components/schemas/Owner"}

    def test_self_reference_terminates(self):
        doc = {
            "components": {
                "schemas": {
                    "Node": {
                        "type": "object",
                        "properties": {"next": {"$ref": "#/components/schemas/Node"}},
                    }
                }
            }
        }
        node = resolve_schema({"$ref": "#/components/schemas/Node"}, doc)
        levels = 0
        while "$ref" not in node:
            node = node["properties"]["next"]
            levels += 1
        assert 0 < levels <= MAX_RESOLVE_DEPTH

    def test_beyond_ceiling_returned_as_is(self, petstore_doc):
        assert resolve_schema(PET_REF, petstore_doc, depth=MAX_RESOLVE_DEPTH + 1) is PET_REF

    def test_resolving_twice_changes_nothing(self, users_doc, petstore_doc):
        once = resolve_schema({"$ref": "#/definitions/User"}, users_doc)
        assert resolve_schema(once, users_doc) == once

        error = resolve_schema({"$ref": "#/components/schemas/Error"}, petstore_doc)
        assert resolve_schema(error, petstore_doc) == error
