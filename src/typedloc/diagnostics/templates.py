"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every failure the generator
    can report.
    """

    # ========================================================================
    # LOCALE IDENTIFIERS
    # ========================================================================

    @staticmethod
    def invalid_language(language: str, locale_code: str) -> Diagnostic:
        """Language subtag not found in the language table.

        Args:
            language: The language subtag that failed lookup
            locale_code: The full locale string being parsed

        Returns:
            Diagnostic for INVALID_LANGUAGE
        """
        msg = f"Invalid language code: '{language}' in locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LANGUAGE,
            message=msg,
            hint="Use an ISO 639 language code such as 'en' or 'fr'",
            locale_code=locale_code,
        )

    @staticmethod
    def invalid_region(region: str, locale_code: str) -> Diagnostic:
        """Region subtag not found in the region table.

        Args:
            region: The region subtag that failed lookup
            locale_code: The full locale string being parsed

        Returns:
            Diagnostic for INVALID_REGION
        """
        msg = f"Invalid country code: '{region}' in locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_REGION,
            message=msg,
            hint="Use an ISO 3166 region code such as 'US' or 'GB'",
            locale_code=locale_code,
        )

    @staticmethod
    def unsupported_subtags(locale_code: str) -> Diagnostic:
        """Locale carries script or variant subtags after the region.

        Args:
            locale_code: The full locale string being parsed

        Returns:
            Diagnostic for INVALID_REGION
        """
        msg = f"Unsupported locale subtags in '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_REGION,
            message=msg,
            hint="Only language and language_REGION locales are supported",
            locale_code=locale_code,
        )

    @staticmethod
    def duplicate_locale(locale_code: str, first: str, second: str) -> Diagnostic:
        """Two input files resolve to the same canonical locale.

        Args:
            locale_code: Canonical locale both files resolve to
            first: Path of the first file
            second: Path of the conflicting file

        Returns:
            Diagnostic for DUPLICATE_LOCALE
        """
        msg = f"Duplicate locale '{locale_code}': {second} conflicts with {first}"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_LOCALE,
            message=msg,
            hint="Keep a single file per locale",
            source_path=second,
            locale_code=locale_code,
        )

    # ========================================================================
    # CATALOG
    # ========================================================================

    @staticmethod
    def missing_template(template_path: str) -> Diagnostic:
        """Configured template file is absent from the input set.

        Args:
            template_path: Expected path of the template file

        Returns:
            Diagnostic for MISSING_TEMPLATE
        """
        msg = f"Template file not found: {template_path}"
        return Diagnostic(
            code=DiagnosticCode.MISSING_TEMPLATE,
            message=msg,
            hint="Create the template file or change the 'template' setting",
            source_path=template_path,
        )

    @staticmethod
    def missing_fallback_locale(
        language: str, regions: Iterable[str], input_dir: str
    ) -> Diagnostic:
        """Language group without a language-default member.

        Args:
            language: Language code of the group
            regions: Region variants found for the language
            input_dir: Input directory the default file belongs in

        Returns:
            Diagnostic for MISSING_FALLBACK_LOCALE
        """
        found = ", ".join(regions)
        msg = (
            f"Missing fallback locale for '{language}': "
            f"found regions [{found}], but no language-default file"
        )
        return Diagnostic(
            code=DiagnosticCode.MISSING_FALLBACK_LOCALE,
            message=msg,
            hint=f"Add {language}.json in {input_dir}",
            locale_code=language,
        )

    @staticmethod
    def unknown_key(key: str, source_path: str) -> Diagnostic:
        """Locale file uses a key absent from the template.

        Args:
            key: The offending key
            source_path: File that declares the key

        Returns:
            Diagnostic for UNKNOWN_KEY
        """
        msg = f"Key not found in template: '{key}' from {source_path}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_KEY,
            message=msg,
            hint=f"Add '{key}' to the template file or remove it from this file",
            source_path=source_path,
            key=key,
        )

    @staticmethod
    def missing_key(key: str, source_path: str) -> Diagnostic:
        """Language-default file omits a template key.

        Args:
            key: The missing key
            source_path: Language-default file lacking the key

        Returns:
            Diagnostic for MISSING_KEY
        """
        msg = f"Key '{key}' from template is missing in {source_path}"
        return Diagnostic(
            code=DiagnosticCode.MISSING_KEY,
            message=msg,
            hint="Language-default files must translate every template key",
            source_path=source_path,
            key=key,
        )

    @staticmethod
    def invalid_key(key: str, source_path: str) -> Diagnostic:
        """Template key cannot become an accessor name.

        Args:
            key: The offending key
            source_path: Template file declaring the key

        Returns:
            Diagnostic for INVALID_KEY
        """
        msg = f"Key '{key}' in {source_path} is not a valid accessor name"
        return Diagnostic(
            code=DiagnosticCode.INVALID_KEY,
            message=msg,
            hint=(
                "Keys must be NFKC-normalized Python identifiers, must not be keywords, "
                "start with '_' or equal 'locale_name'"
            ),
            source_path=source_path,
            key=key,
        )

    @staticmethod
    def invalid_translation_file(source_path: str, reason: str) -> Diagnostic:
        """Translation file content is not a flat object of strings.

        Args:
            source_path: The offending file
            reason: What is wrong with the content

        Returns:
            Diagnostic for INVALID_TRANSLATION_FILE
        """
        msg = f"Invalid translation file {source_path}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_TRANSLATION_FILE,
            message=msg,
            hint="Translation files must contain a JSON object mapping keys to strings",
            source_path=source_path,
        )

    # ========================================================================
    # I/O
    # ========================================================================

    @staticmethod
    def missing_input_directory(path: str) -> Diagnostic:
        """Input directory does not exist.

        Args:
            path: Configured input directory

        Returns:
            Diagnostic for MISSING_INPUT_DIRECTORY
        """
        msg = f"Directory not found: {path}"
        return Diagnostic(
            code=DiagnosticCode.MISSING_INPUT_DIRECTORY,
            message=msg,
            hint="Create the directory or change the 'input-dir' setting",
            source_path=path,
        )

    @staticmethod
    def missing_file(path: str) -> Diagnostic:
        """Input file cannot be read.

        Args:
            path: Path of the file

        Returns:
            Diagnostic for MISSING_FILE
        """
        msg = f"File not found: {path}"
        return Diagnostic(
            code=DiagnosticCode.MISSING_FILE,
            message=msg,
            source_path=path,
        )

    @staticmethod
    def output_write_failed(path: str, reason: str) -> Diagnostic:
        """Generated file could not be written.

        Args:
            path: Target path
            reason: Underlying OS error text

        Returns:
            Diagnostic for OUTPUT_WRITE_FAILED
        """
        msg = f"Cannot write {path}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.OUTPUT_WRITE_FAILED,
            message=msg,
            hint="Check permissions of the output directory",
            source_path=path,
        )

    # ========================================================================
    # CONFIGURATION
    # ========================================================================

    @staticmethod
    def invalid_config(reason: str, source_path: str | None = None) -> Diagnostic:
        """Configuration value or file is invalid.

        Args:
            reason: What is wrong
            source_path: Configuration file, if any

        Returns:
            Diagnostic for INVALID_CONFIG
        """
        msg = f"Invalid configuration: {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CONFIG,
            message=msg,
            source_path=source_path,
        )

    # ========================================================================
    # DISPATCH
    # ========================================================================

    @staticmethod
    def unsupported_locale(locale_code: str) -> Diagnostic:
        """Requested locale matches no generated class.

        Args:
            locale_code: Requested locale

        Returns:
            Diagnostic for UNSUPPORTED_LOCALE
        """
        msg = f"No generated translation class for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_LOCALE,
            message=msg,
            hint="Check that the locale is listed in SUPPORTED_LOCALES",
            locale_code=locale_code,
        )
