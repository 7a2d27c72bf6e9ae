# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Integration tests running the whole finder over sample projects."""
