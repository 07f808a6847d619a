"""
docvcs.samples

Demo content for an empty database: one repository with three unstaged files.
"""

from typing import Optional

from docvcs.constants import ChangeType
from docvcs.database import LocalDatabase
from docvcs.logger import get_logger
from docvcs.models import Repository

SAMPLE_REPOSITORY_NAME = "kanedocs-demo"

SAMPLE_README = """# KaneDocs Demo Repository

Welcome to the KaneDocs demo! This repository showcases the local database git functionality.

## Features

- Local storage-based git simulation
- Repository management
- Branch operations
- Commit history
- Working directory changes
- File staging and unstaging

## Getting Started

1. Create new files or modify existing ones
2. Stage your changes
3. Commit with a meaningful message
4. View your commit history

This is all stored locally in a SQLite database!
"""

SAMPLE_INDEX_TS = """// Sample TypeScript file
export interface User {
  id: string;
  name: string;
  email: string;
}

export class UserService {
  private users: User[] = [];

  addUser(user: User): void {
    this.users.push(user);
  }

  getUser(id: string): User | undefined {
    return this.users.find(u => u.id === id);
  }

  getAllUsers(): User[] {
    return [...this.users];
  }
}
"""

SAMPLE_PACKAGE_JSON = """{
  "name": "kanedocs-demo",
  "version": "1.0.0",
  "description": "Demo repository for KaneDocs",
  "main": "src/index.ts",
  "scripts": {
    "build": "tsc",
    "dev": "ts-node src/index.ts"
  },
  "dependencies": {
    "typescript": "^5.0.0"
  }
}
"""

SAMPLE_FILES = {
    "README.md": SAMPLE_README,
    "src/index.ts": SAMPLE_INDEX_TS,
    "package.json": SAMPLE_PACKAGE_JSON,
}


def seed_sample_data(db: LocalDatabase) -> Optional[Repository]:
    """
    Populate an empty database with the demo repository.

    Arguments:
        db (LocalDatabase): Target database.

    Returns:
        Optional[Repository]: The demo repository, or None when storage is unavailable
            or repositories already exist.
    """
    logger = get_logger("samples")
    if not db.store.available:
        return None
    with db.store.transaction():
        if db.repositories.get_all():
            logger.debug("Repositories present; skipping sample data.")
            return None

        logger.info("Initializing sample data...")
        repository = db.repositories.create(
            name=SAMPLE_REPOSITORY_NAME,
            description="A demo repository for KaneDocs with sample content",
            language="TypeScript",
            topics=["documentation", "demo", "typescript"],
        )
        for path, content in SAMPLE_FILES.items():
            db.working_directory.add_file(
                repository.id, path, content, ChangeType.ADDED
            )
    logger.info("Sample data initialized successfully!")
    return repository
