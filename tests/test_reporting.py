from maptags import TagBoard, board_frame, selection_summary


def test_board_frame_tracks_page_and_selection():
    board = TagBoard()
    board.initialize([f"Tag {i}" for i in range(13)])
    board.toggle(11)
    board.go_to_page(1)

    df = board_frame(board)
    assert list(df.columns) == ["Index", "Label", "Page", "Visible", "Selected"]
    assert len(df) == 13
    assert df["Page"].tolist() == [1] * 10 + [2] * 3
    assert df["Visible"].tolist() == [False] * 10 + [True] * 3
    assert df.loc[df["Selected"], "Label"].tolist() == ["Tag 11"]


def test_board_frame_empty():
    df = board_frame(TagBoard())
    assert df.empty
    assert "Selected" in df.columns


def test_selection_summary():
    board = TagBoard()
    board.initialize(["Flow", "Meme", "Ugly"])
    assert selection_summary(board) == "No tags selected"
    board.toggle(2)
    board.toggle(0)
    assert selection_summary(board) == "Selected tags: Flow, Ugly"
