"""Generated API documentation served by FastAPI."""


async def test_swagger_ui_is_served(client):
    res = await client.get("/api-docs")

    assert res.status_code == 200
    assert "swagger-ui" in res.text


async def test_openapi_describes_both_routes(client):
    schema = (await client.get("/openapi.json")).json()

    assert schema["info"]["title"] == "API de Usuários"
    assert schema["servers"] == [{"url": "http://test"}]

    post = schema["paths"]["/usuario"]["post"]
    assert post["tags"] == ["Usuario"]
    assert set(post["responses"]) >= {"201", "400", "500"}

    get = schema["paths"]["/usuario/{user_id}"]["get"]
    assert set(get["responses"]) >= {"200", "404"}


async def test_openapi_user_schema_fields(client):
    schema = (await client.get("/openapi.json")).json()

    user = schema["components"]["schemas"]["UserRead"]
    assert set(user["required"]) == {"id", "name", "birth_date"}
    assert user["properties"]["birth_date"]["format"] == "date"


async def test_openapi_request_schema_lists_all_fields_as_required(client):
    schema = (await client.get("/openapi.json")).json()

    create = schema["components"]["schemas"]["UserCreate"]
    assert create["required"] == ["id", "name", "birth_date"]
    assert create["properties"]["name"]["type"] == "string"
    assert create["properties"]["birth_date"]["type"] == "string"
    assert create["properties"]["birth_date"]["format"] == "date"
    assert "anyOf" not in create["properties"]["name"]
