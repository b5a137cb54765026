from tsdoc_extractor import InvalidPatternError, LoggingConfigError, SourceFileNotFoundError, TsDocError


def test_hierarchy():
    assert issubclass(SourceFileNotFoundError, TsDocError)
    assert issubclass(InvalidPatternError, TsDocError)


def test_source_file_not_found_message():
    error = SourceFileNotFoundError("lib/missing.ts")
    assert str(error) == "Invalid source file: lib/missing.ts"
    assert error.file_name == "lib/missing.ts"


def test_logging_config_error_is_extraction_error():
    assert issubclass(LoggingConfigError, TsDocError)
