import argparse
import logging
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)


# Base class declared by the framework
class Document:

    def __init__(self, name: str):
        self.name = name

    def get_name(self) -> str:
        return self.name

    def open(self) -> str:
        raise NotImplementedError

    def close(self) -> str:
        raise NotImplementedError


# Concrete document defined by the client
class MyDocument(Document):

    def open(self) -> str:
        message = "MyDocument: Open()"
        print("   %s" % message)
        return message

    def close(self) -> str:
        message = "MyDocument: Close()"
        print("   %s" % message)
        return message


DocumentFactory = Callable[[str], Document]


# Framework class. Knows when a document has to be created,
# but leaves the choice of its type to create_document
class Application:

    def __init__(self, document_factory: Optional[DocumentFactory] = None):
        print("Application: ctor")
        self.document_factory = document_factory
        self.docs: List[Document] = []

    @property
    def documents(self) -> Tuple[Document, ...]:
        return tuple(self.docs)

    # The client calls this entry point of the framework
    def new_document(self, name: str) -> Document:
        print("Application: NewDocument()")
        # the framework calls the "hole" reserved for client customization
        document = self.create_document(name)
        document.open()
        self.docs.append(document)
        logger.debug("Stored document %r as #%d", name, len(self.docs))
        return document

    def report_docs(self) -> List[str]:
        print("Application: ReportDocs()")
        names = [document.get_name() for document in self.docs]
        for name in names:
            print("   %s" % name)
        return names

    def close_documents(self) -> List[str]:
        print("Application: CloseDocuments()")
        names = []
        while self.docs:
            document = self.docs[0]
            document.close()
            self.docs.pop(0)
            names.append(document.get_name())
        return names

    # The "hole": filled either by an injected factory
    # or by a subclass overriding this method
    def create_document(self, name: str) -> Document:
        if self.document_factory is None:
            raise NotImplementedError(
                "%s needs a document_factory or a create_document override" % type(self).__name__)
        logger.debug("Creating document %r with %r", name, self.document_factory)
        return self.document_factory(name)


# Customization of the framework defined by the client
class MyApplication(Application):

    def __init__(self):
        super().__init__()
        print("MyApplication: ctor")

    def create_document(self, name: str) -> Document:
        print("   MyApplication: CreateDocument()")
        return MyDocument(name)


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Factory Method pattern demo")
    parser.add_argument("--verbose", action="store_true", help="log document bookkeeping")
    args = parser.parse_args(argv)
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    my_app = MyApplication()

    my_app.new_document("foo")
    my_app.new_document("bar")
    my_app.report_docs()


if __name__ == '__main__':
    logging.basicConfig()
    main()
