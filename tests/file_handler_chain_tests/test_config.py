import pytest
from file_handler_chain.config import FileHandlerConfig, file_handler_chain
from file_handler_chain.errors import ConfigurationError
from file_handler_chain.file_handlers import DocFileHandler, PdfFileHandler, TextFileHandler
from file_handler_chain.file_types import FileType


@pytest.mark.unit
def test_default_chain_is_txt_doc_pdf():
    head = file_handler_chain()
    assert [type(h) for h in head.handlers()] == [TextFileHandler, DocFileHandler, PdfFileHandler]


@pytest.mark.unit
def test_config_controls_order():
    head = file_handler_chain(FileHandlerConfig(file_types=(FileType.PDF, FileType.TXT)))
    assert [type(h) for h in head.handlers()] == [PdfFileHandler, TextFileHandler]


@pytest.mark.unit
def test_empty_config_aborts_chain_construction():
    with pytest.raises(ConfigurationError, match="No handlers available"):
        file_handler_chain(FileHandlerConfig(file_types=()))


@pytest.mark.unit
def test_unknown_file_type_is_a_configuration_error():
    with pytest.raises(ConfigurationError, match="No handler registered"):
        file_handler_chain(FileHandlerConfig(file_types=(FileType.TXT, ".png")))
