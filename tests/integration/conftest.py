# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Shared fixtures for integration tests.

Provides a representative JavaScript project with test files spread over
nested directories, hidden directories and non-test sources.
"""

from pathlib import Path

import pytest


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """Create a small JavaScript project for end-to-end scans.

    Body lengths (lines between a test start and the next boundary):
    - test/user.test.js: 'creates a user' 6, 'rejects duplicates' 3
    - test/api/orders.spec.js: 'lists orders' 10, 'nested outer' 0,
      'nested inner' 4, 'cancels an order' 3
    - test/api/Payment.Test.js: 'charges' 1
    - src/util.js, .cache/stale.test.js: ignored

    Returns:
        Path to the project root directory
    """
    project_root = tmp_path / "sample_project"
    (project_root / "src").mkdir(parents=True)
    (project_root / "test" / "api").mkdir(parents=True)
    (project_root / ".cache").mkdir()

    (project_root / "src" / "util.js").write_text(
        """module.exports = function add(a, b) {
  it('looks like a test but is not in a test file', () => {
    return a + b;
  });
};
""",
        encoding="utf-8",
    )

    (project_root / ".cache" / "stale.test.js").write_text(
        "it('should never be seen', () => {\n  a();\n  b();\n});\n",
        encoding="utf-8",
    )

    (project_root / "test" / "user.test.js").write_text(
        """const { createUser } = require('../src/user');

describe('users', () => {
  beforeEach(() => {
    resetDb();
  });

  it('creates a user', async () => {
    const user = await createUser({ name: 'a' });

    expect(user.id).toBeDefined();
    expect(user.name).toBe('a');
  });

  it('rejects duplicates', async () => {
    await expect(createUser({ name: 'a' })).rejects.toThrow();
  });
});""",
        encoding="utf-8",
    )

    (project_root / "test" / "api" / "orders.spec.js").write_text(
        """describe('orders api', () => {
  it('lists orders', async () => {
    const res = await get('/orders');
    expect(res.status).toBe(200);
    expect(res.body).toHaveLength(3);
    expect(res.body[0].id).toBe(1);
    expect(res.body[1].id).toBe(2);
    expect(res.body[2].id).toBe(3);
    expect(res.headers['x-total']).toBe('3');
    // TODO split this up
  });

  it('nested outer', () => {
    it('nested inner', () => {
      inner();
    });
  });

  afterEach(() => {
    cleanup();
  });

  it('cancels an order', () => {
    cancel(1);
  });
});""",
        encoding="utf-8",
    )

    (project_root / "test" / "api" / "Payment.Test.js").write_text(
        "it('charges', () => charge(1));\n",
        encoding="utf-8",
    )

    return project_root
