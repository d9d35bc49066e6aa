import unittest
from unittest.mock import MagicMock

from patrones.core.strategies import (
    TextStrategy,
    UpperCaseStrategy,
    LowerCaseStrategy,
    TextPrinter,
    InvalidStrategyError,
    StrategyError
)


class TestTextStrategies(unittest.TestCase):

    def setUp(self):
        self.upper = UpperCaseStrategy()
        self.lower = LowerCaseStrategy()

    def test_printer_mayusculas(self):
        printer = TextPrinter(self.upper)
        self.assertEqual(printer.apply("O tempora, o mores!"), "O TEMPORA, O MORES!")

    def test_printer_minusculas(self):
        printer = TextPrinter(self.lower)
        self.assertEqual(printer.apply("O tempora, o mores!"), "o tempora, o mores!")

    def test_print_es_alias_de_apply(self):
        printer = TextPrinter(self.upper)
        self.assertEqual(printer.print("abc"), printer.apply("abc"))

    def test_round_trip_mayusculas(self):
        """
        upper(lower(s)) == upper(s) para textos con letras.
        """
        for texto in ["Hola Mundo", "ÁRBOL ñandú", "MiXeD CaSe", "Straße", ""]:
            self.assertEqual(
                self.upper.transform(self.lower.transform(texto)),
                self.upper.transform(texto),
                f"Fallo para {texto!r}"
            )

    def test_estrategias_totales(self):
        for texto in ["", "123 !?", "\n\t"]:
            self.assertEqual(self.upper.transform(texto), texto)
            self.assertEqual(self.lower.transform(texto), texto)

    def test_printer_delega_sin_modificar(self):
        """
        El printer reenvia la entrada tal cual y retorna el resultado tal cual.
        """
        estrategia = MagicMock(spec=TextStrategy)
        estrategia.transform.return_value = "resultado"
        estrategia.get_name.return_value = "Mock"

        printer = TextPrinter(estrategia)
        resultado = printer.apply("  entrada  ")

        estrategia.transform.assert_called_once_with("  entrada  ")
        self.assertEqual(resultado, "resultado")

    def test_estrategia_personalizada(self):
        class ReverseStrategy(TextStrategy):
            def transform(self, text):
                return text[::-1]

            def get_name(self):
                return "Reverse"

        self.assertEqual(TextPrinter(ReverseStrategy()).apply("abc"), "cba")

    def test_estrategia_invalida(self):
        with self.assertRaises(InvalidStrategyError):
            TextPrinter(None)

        with self.assertRaises(TypeError):
            TextPrinter(str.upper)

        self.assertTrue(issubclass(InvalidStrategyError, StrategyError))

    def test_estrategia_de_solo_lectura(self):
        printer = TextPrinter(self.upper)

        self.assertIs(printer.strategy, self.upper)
        with self.assertRaises(AttributeError):
            printer.strategy = self.lower

    def test_interfaz_abstracta(self):
        with self.assertRaises(TypeError):
            TextStrategy()

    def test_nombres(self):
        self.assertEqual(self.upper.get_name(), "Upper Case")
        self.assertEqual(self.lower.get_name(), "Lower Case")


if __name__ == '__main__':
    unittest.main()
