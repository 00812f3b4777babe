import os
import tempfile
import unittest

from syntax_validation.engine import SyntaxStyleValidator, StyleLoadError
from syntax_validation.models import ErrorRole


class TestSyntaxStyleValidator(unittest.TestCase):
    def setUp(self):
        self.validator = SyntaxStyleValidator()
        self.valid_style = {
            'metadata': {'name': 'Python'},
            'keywords': [
                {'beginString': 'def'},
                {'beginString': 'class'},
                {'beginString': '\\bself\\b', 'regularExpression': True},
            ],
            'strings': [
                {'beginString': '"', 'endString': '"'},
                {'beginString': "'", 'endString': "'"},
            ],
            'outlineMenu': [
                {'beginString': '^\\s*def\\s+(\\w+)'},
            ],
            'commentDelimiters': {'inlineDelimiter': '#'},
        }

    def test_valid_style(self):
        self.assertEqual(self.validator.validate_syntax(self.valid_style), [])

    def test_empty_style(self):
        self.assertEqual(self.validator.validate_syntax({}), [])

    def test_duplicate_definition(self):
        style = {'keywords': [{'beginString': 'def'}, {'beginString': 'if'}, {'beginString': 'def'}]}

        errors = self.validator.validate_syntax(style)

        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].type, 'keywords')
        self.assertEqual(errors[0].role, ErrorRole.BEGIN_STRING)
        self.assertEqual(errors[0].string, 'def')
        self.assertEqual(errors[0].failure_reason, 'multiple registered.')

    def test_same_begin_different_end_is_not_duplicate(self):
        style = {'strings': [
            {'beginString': '"', 'endString': '"'},
            {'beginString': '"', 'endString': '"""'},
        ]}

        self.assertEqual(self.validator.validate_syntax(style), [])

    def test_case_differences_are_not_duplicates(self):
        style = {'types': [{'beginString': 'String'}, {'beginString': 'string'}]}

        self.assertEqual(self.validator.validate_syntax(style), [])

    def test_invalid_begin_regex(self):
        style = {'numbers': [{'beginString': '\\d+(', 'regularExpression': True}]}

        errors = self.validator.validate_syntax(style)

        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].role, ErrorRole.BEGIN_STRING)
        self.assertEqual(errors[0].string, '\\d+(')
        self.assertTrue(errors[0].failure_reason.startswith('Regex Error: '))

    def test_invalid_pattern_without_regex_flag_is_accepted(self):
        style = {'numbers': [{'beginString': '\\d+('}]}

        self.assertEqual(self.validator.validate_syntax(style), [])

    def test_invalid_end_regex(self):
        style = {'comments': [{'beginString': '/\\*', 'endString': '*/', 'regularExpression': True}]}

        errors = self.validator.validate_syntax(style)

        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].role, ErrorRole.END_STRING)
        self.assertEqual(errors[0].string, '*/')

    def test_duplicate_reported_instead_of_regex_error(self):
        style = {'values': [
            {'beginString': '[', 'regularExpression': True},
            {'beginString': '[', 'regularExpression': True},
        ]}

        errors = self.validator.validate_syntax(style)

        self.assertEqual(len(errors), 2)
        self.assertTrue(errors[0].failure_reason.startswith('Regex Error: '))
        self.assertEqual(errors[1].failure_reason, 'multiple registered.')

    def test_repeat_count_overflow_is_a_regex_error(self):
        style = {'numbers': [{'beginString': 'a{99999999999}', 'regularExpression': True}]}

        errors = self.validator.validate_syntax(style)

        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].string, 'a{99999999999}')
        self.assertTrue(errors[0].failure_reason.startswith('Regex Error: '))

    def test_deep_nesting_is_a_regex_error(self):
        pattern = '(' * 5000 + ')' * 5000
        style = {'values': [{'beginString': pattern, 'regularExpression': True}]}

        errors = self.validator.validate_syntax(style)

        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].role, ErrorRole.BEGIN_STRING)
        self.assertTrue(errors[0].failure_reason.startswith('Regex Error: '))

    def test_duplicate_separated_by_case_variant(self):
        style = {'keywords': [{'beginString': 'def'}, {'beginString': 'DEF'}, {'beginString': 'def'}]}

        errors = self.validator.validate_syntax(style)

        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].string, 'def')
        self.assertEqual(errors[0].failure_reason, 'multiple registered.')

    def test_invalid_outline_regex(self):
        style = {'outlineMenu': [{'beginString': '^(class'}]}

        errors = self.validator.validate_syntax(style)

        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].type, 'outline')
        self.assertEqual(errors[0].role, ErrorRole.REGULAR_EXPRESSION)
        self.assertEqual(errors[0].localized_type, 'Outline')

    def test_outline_overflow_and_deep_nesting(self):
        style = {'outlineMenu': [
            {'beginString': 'a{99999999999}'},
            {'beginString': '(' * 5000 + ')' * 5000},
        ]}

        errors = self.validator.validate_syntax(style)

        self.assertEqual(len(errors), 2)
        for error in errors:
            self.assertEqual(error.type, 'outline')
            self.assertTrue(error.failure_reason.startswith('Regex Error: '))

    def test_block_comment_missing_end(self):
        style = {'commentDelimiters': {'beginDelimiter': '/*'}}

        errors = self.validator.validate_syntax(style)

        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].type, 'block comment')
        self.assertEqual(errors[0].role, ErrorRole.BEGIN_STRING)
        self.assertEqual(errors[0].string, '/*')
        self.assertEqual(
            errors[0].failure_reason,
            'Block comment needs both begin delimiter and end delimiter.'
        )

    def test_block_comment_missing_begin(self):
        errors = self.validator.validate_syntax({'commentDelimiters': {'endDelimiter': '*/'}})

        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].role, ErrorRole.END_STRING)

    def test_block_comment_pair(self):
        style = {'commentDelimiters': {'beginDelimiter': '/*', 'endDelimiter': '*/'}}

        self.assertEqual(self.validator.validate_syntax(style), [])

    def test_error_order(self):
        style = {
            'commentDelimiters': {'endDelimiter': '*/'},
            'outlineMenu': [{'beginString': '('}],
            'keywords': [{'beginString': 'if'}, {'beginString': 'if'}],
        }

        errors = self.validator.validate_syntax(style)

        self.assertEqual([e.type for e in errors], ['keywords', 'outline', 'block comment'])

    def test_malformed_sections_are_skipped(self):
        style = {'keywords': 'def', 'commands': [None, 'print', {'beginString': ''}]}

        self.assertEqual(self.validator.validate_syntax(style), [])

    def test_statistics(self):
        self.validator.validate_syntax(self.valid_style)
        self.validator.validate_syntax({'commentDelimiters': {'beginDelimiter': '/*'}})

        stats = self.validator.get_statistics()
        self.assertEqual(stats['total_validated'], 2)
        self.assertEqual(stats['valid'], 1)
        self.assertEqual(stats['invalid'], 1)
        self.assertEqual(stats['total_errors'], 1)
        self.assertEqual(stats['valid_rate'], 0.5)

        self.validator.reset_statistics()
        self.assertEqual(self.validator.get_statistics()['total_validated'], 0)


class TestLoadStyle(unittest.TestCase):
    def setUp(self):
        self.validator = SyntaxStyleValidator()
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def write(self, name, content):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def test_load_and_validate_file(self):
        path = self.write('Test.yaml', (
            "metadata:\n"
            "  name: Test\n"
            "keywords:\n"
            "  - beginString: def\n"
            "  - beginString: def\n"
        ))

        errors = self.validator.validate_file(path)

        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].string, 'def')

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            self.validator.load_style(os.path.join(self.tmpdir.name, 'missing.yaml'))

    def test_non_mapping_document(self):
        path = self.write('List.yaml', "- one\n- two\n")

        with self.assertRaises(StyleLoadError):
            self.validator.load_style(path)

    def test_invalid_yaml(self):
        path = self.write('Broken.yaml', "keywords: [unclosed\n")

        with self.assertRaises(StyleLoadError):
            self.validator.load_style(path)


if __name__ == '__main__':
    unittest.main()
