"""
Unit Tests for piece-eval

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_piece_value.py

    # Run with coverage
    pytest tests/ --cov=piece_eval --cov-report=html

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
