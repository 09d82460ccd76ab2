from phaset_mcp.collector.schema import CollectedFile, CollectionEvent, CollectionResult


def test_event_messages_name_the_path():
    assert CollectionEvent("binary", "logo.bin").message == "Skipping logo.bin: appears to be binary"
    assert CollectionEvent("unreadable", "a.txt", "denied").message == "Could not read a.txt: denied"
    assert "Truncating big.json: too large" in CollectionEvent("truncated", "big.json", "x").message
    assert "Cannot read directory secret" in CollectionEvent("directory_unreadable", "secret", "x").message
    assert "token budget" in CollectionEvent("budget_exhausted", "c.md", "x").message


def test_result_counters():
    result = CollectionResult(
        root="/repo",
        profile="standard",
        files=[
            CollectedFile(path="a", content="x", original_byte_length=1),
            CollectedFile(path="b", content="y", original_byte_length=9, truncated=True),
        ],
        events=[
            CollectionEvent("truncated", "b"),
            CollectionEvent("binary", "c"),
            CollectionEvent("unreadable", "d"),
            CollectionEvent("depth_pruned", "deep/dir"),
        ],
        budget_skipped=2,
    )

    assert result.truncated_count == 1
    assert result.skipped_count == 4
    assert len(result.diagnostics) == 4
    assert not result.is_empty


def test_empty_result_payload_carries_warning():
    payload = CollectionResult(root="/repo", profile="minimal").to_dict()

    assert payload["filesCollected"] == 0
    assert payload["files"] == []
    assert payload["depth"] == "minimal"
    assert "No relevant files found" in payload["warning"]


def test_payload_file_entries():
    result = CollectionResult(
        root="/repo",
        profile="standard",
        files=[CollectedFile(path="README.md", content="# hi", original_byte_length=4, estimated_tokens=1)],
        total_tokens=1,
    )
    payload = result.to_dict()

    assert "warning" not in payload
    assert payload["totalTokens"] == 1
    assert payload["files"] == [
        {
            "path": "README.md",
            "sizeBytes": 4,
            "originalByteLength": 4,
            "truncated": False,
            "content": "# hi",
        }
    ]
