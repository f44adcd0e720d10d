from streamlit.testing.v1 import AppTest

# path is relative to this test file
APP = "../app.py"


def test_page_renders_and_reruns_without_errors():
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    assert not at.exception
    assert any("Sample Templates" in e.label for e in at.expander)

    # rerun reuses cached downloads and the same session
    at.run()
    assert not at.exception
    assert not at.session_state["checker"].own_loaded


def test_check_button_disabled_until_both_lists_loaded():
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    assert at.button[0].disabled
