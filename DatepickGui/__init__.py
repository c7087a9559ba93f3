"Date and date/time picker windows"
