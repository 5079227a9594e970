#!/usr/bin/env python3
"""
Swagger YAML Editor
Interactive prompt for viewing, creating and updating OpenAPI YAML files
"""

import logging
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from schema_inferencer import infer, load_json_object
from swagger_errors import SwaggerEditorError
from swagger_merge import apply_operation
from swagger_model import new_document
from swagger_store import read_document, read_text, write_document

# ================= CONFIG =================

LOG_LEVEL = logging.WARNING
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

FILE_KEYWORD = "file"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PromptStep:
    message: str
    lowercase: bool = False


ACTION_STEP = PromptStep("\nEnter action (view/create/update/exit): ", lowercase=True)
VIEW_FILE_STEP = PromptStep("Enter the path to the Swagger YAML file: ")
CREATE_FILE_STEP = PromptStep("Enter the path to create a new Swagger YAML file: ")
UPDATE_FILE_STEP = PromptStep("Enter the path to the Swagger YAML file: ")
API_PATH_STEP = PromptStep("Enter the path to add/update (e.g., /pets): ")
METHOD_STEP = PromptStep("Enter HTTP method (get/post/put/delete): ", lowercase=True)
PAYLOAD_STEP = PromptStep("Enter JSON response directly or type 'file' to provide a file path: ")
JSON_FILE_STEP = PromptStep("Enter the JSON file path: ")


class LinePrompt:
    """Asks one prompt step at a time over a pair of text streams"""

    def __init__(self, instream: TextIO, outstream: TextIO):
        self.instream = instream
        self.outstream = outstream

    def ask(self, step: PromptStep) -> str:
        self.outstream.write(step.message)
        self.outstream.flush()

        line = self.instream.readline()
        if line == "":
            raise EOFError("input stream closed")

        answer = line.strip()
        return answer.lower() if step.lowercase else answer


class SwaggerEditor:
    """Read-eval loop over the view/create/update/exit actions"""

    def __init__(self, instream: TextIO, outstream: TextIO):
        self.prompt = LinePrompt(instream, outstream)
        self.out = outstream
        self.actions = {
            "view": self.view,
            "create": self.create,
            "update": self.update,
        }

    def _print(self, *args):
        print(*args, file=self.out)

    def run(self) -> int:
        while True:
            try:
                action = self.prompt.ask(ACTION_STEP)
                if not self.dispatch(action):
                    return 0
            except EOFError:
                logger.debug("Input closed, leaving editor")
                self._print()
                return 0

    def dispatch(self, action: str) -> bool:
        """Run one action. Returns False once the user asks to exit."""
        action = action.strip().lower()

        if action == "exit":
            self._print("Exiting program.")
            return False

        handler = self.actions.get(action)
        if handler is None:
            self._print("Invalid action. Please enter 'view', 'create', 'update', or 'exit'.")
            return True

        handler()
        return True

    def view(self):
        file_path = self.prompt.ask(VIEW_FILE_STEP)
        try:
            content = read_text(file_path)
        except SwaggerEditorError as e:
            self._print("Error viewing Swagger file:", e)
            return

        self._print("Swagger File Contents:")
        self._print(content)

    def create(self):
        file_path = self.prompt.ask(CREATE_FILE_STEP)
        try:
            write_document(file_path, new_document())
        except SwaggerEditorError as e:
            self._print("Error creating Swagger file:", e)
            return

        self._print("Swagger file updated successfully.")

    def update(self):
        file_path = self.prompt.ask(UPDATE_FILE_STEP)
        try:
            self._update(file_path)
        except SwaggerEditorError as e:
            self._print("Error updating Swagger file:", e)

    def _update(self, file_path: str):
        doc = read_document(file_path)

        path = self.prompt.ask(API_PATH_STEP)
        method = self.prompt.ask(METHOD_STEP)
        payload = self._read_payload()

        schema = infer(payload)

        if doc.has_operation(path, method):
            self._print("Updating the existing operation response...")
        else:
            self._print("Creating a new operation...")
        apply_operation(doc, path, method, schema)

        write_document(file_path, doc)
        self._print("Swagger file updated successfully.")

    def _read_payload(self) -> dict:
        answer = self.prompt.ask(PAYLOAD_STEP)
        if answer.lower() == FILE_KEYWORD:
            json_path = self.prompt.ask(JSON_FILE_STEP)
            return load_json_object(read_text(json_path))
        return load_json_object(answer)


def main(instream: Optional[TextIO] = None, outstream: Optional[TextIO] = None) -> int:
    """Main entry point"""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    editor = SwaggerEditor(instream or sys.stdin, outstream or sys.stdout)
    return editor.run()


if __name__ == "__main__":
    raise SystemExit(main())
