from kernelsim.models.messages import PROTOCOL_VERSION, create_message


def test_create_message_defaults():
    msg = create_message(msg_type="status", channel="iopub", session="client-1")

    assert msg.msg_type == "status"
    assert msg.header.session == "client-1"
    assert msg.header.version == PROTOCOL_VERSION
    assert msg.parent_header == {}
    assert msg.content == {}
    assert msg.channel == "iopub"


def test_create_message_explicit_id_and_content():
    msg = create_message(
        msg_type="execute_input",
        channel="iopub",
        session="client-1",
        username="someone",
        msg_id="abc",
        content={"code": "1 + 1", "execution_count": 1},
    )

    assert msg.msg_id == "abc"
    assert msg.header.username == "someone"
    assert msg.content["code"] == "1 + 1"


def test_message_ids_are_unique():
    ids = {
        create_message(msg_type="status", channel="iopub", session="s").msg_id for _ in range(50)
    }
    assert len(ids) == 50
